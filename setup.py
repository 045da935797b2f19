from setuptools import setup

setup(
    name='id-obfuscator',
    version='1.0',
    description='Reversible obfuscation of integer database ids using Knuth multiplicative hashing.',
    python_requires='>=3.10',
    py_modules=['app', 'config', 'core_logic', 'models', 'mymath', 'obfuscation'],
    install_requires=[
        'fastapi',
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest', 'httpx'],
    },
)
