#!/usr/bin/env python3


#============================================
class PostsError(Exception):
	"""
	Base error for the DailyDATA post generator.
	"""


#============================================
class ResourceMissing(PostsError):
	"""
	An input file (CSV or site config) does not exist.
	"""


#============================================
class EmptyInput(ResourceMissing):
	"""
	The CSV exists but holds no header or no data rows.
	"""


#============================================
class ResourceCorrupt(PostsError):
	"""
	An input file exists but cannot be used (bad JSON, bad shape, no date column).
	"""


#============================================
class WriteFailure(PostsError):
	"""
	Writing a generated file failed.
	"""
