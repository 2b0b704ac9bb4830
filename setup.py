from setuptools import setup, find_packages

setup(
    name='vital-joinplan',
    version='0.0.1',
    author='Marc Hadfield',
    author_email='marc@vital.ai',
    description='Vital JoinPlan: in-memory hash joins and join-order planning',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/vital-ai/joinplan',
    packages=find_packages(exclude=["tests", "test_scripts"]),
    license='Apache License 2.0',
    install_requires=[

        'pandas',
        'numpy',
        'networkx',
        'pyyaml',
        'tqdm',

    ],
    extras_require={

        'test': [
            'pytest',
        ],

    },
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
