"""Files hash calculator: MD5/SHA1/SHA256/SHA512 hashing, result formatting, verification and PE version lookup."""

__version__ = "2.4.0.0"