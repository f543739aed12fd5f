from setuptools import setup, find_packages


setup(
    name="crcsum",
    version="0.1",
    packages=find_packages(include=["crcsum", "crcsum.*"]),
    description="CRC16 (ARC) and CRC32 (ISO-HDLC) checksums of files, table driven.",
    author="crcsum contributors",
    python_requires=">=3.8",
    install_requires=[],
    entry_points={
        "console_scripts": [
            "crcsum=crcsum.cli:main",
        ]
    },
)
