from setuptools import setup
setup(
    name='playing-cards',
    packages=['playing_cards'],
    version='0.1.0',
    license='MIT',
    description='A standard 52-card deck built on constant-memory generators',
    keywords=[
        'playing-cards',
        'deck',
        'generator',
        'shuffle',
        'card-game'
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.21',
        'scikit-learn>=1.0'
    ],
    extras_require={
        'test': ['pytest>=7.0']
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Games/Entertainment',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3'
    ],
)
