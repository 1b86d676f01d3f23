from setuptools import setup, find_packages
setup(
        name='unisets',
        version='0.1',
        description='Array backed sorted set and linked set containers',
        license='MIT',
        packages=find_packages(exclude=['tests', 'tests.*']),
        install_requires=[],
        extras_require={'test': ['pytest']},
        python_requires='>=3.6'
)
