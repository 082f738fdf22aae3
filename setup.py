import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name='alttp-rom-patcher',
    version='31.0.0',
    description='ROM patching engine for the A Link to the Past Randomizer',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    install_requires=['ips.py', 'bsdiff4', 'flask', 'flask_expects_json'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['alttp-rom=alttp_rom.__main__:main_entry']},
    python_requires='>=3.7'
)
