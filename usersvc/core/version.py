# (c) Copyright Datacraft, 2026
from importlib.metadata import PackageNotFoundError, version

try:
	__version__ = version("usersvc")
except PackageNotFoundError:
	__version__ = "0.0.0"
