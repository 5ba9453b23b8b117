[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fhashkit"
version = "2.4.0.0"
description = "Files hash calculator: MD5, SHA1, SHA256 and SHA512 of files, with result listing, verification and PE version lookup"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "md5", "sha1", "sha256", "sha512", "checksum", "verify", "pe", "version"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fhash = "fhashkit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fhashkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
