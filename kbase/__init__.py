"""Foundation utilities: lexical paths, path lookup, file helpers, base64, MD5, GUIDs and more."""

__version__ = "0.1.0"