#!/usr/bin/env python3

# Standard Library
import os
import json
import hashlib

# local repo modules
import dailydata_tools.errors


#============================================
def default_run_state() -> dict:
	"""
	Get the empty run state used on a first run.

	Returns:
		dict: {'lastDate': None, 'hashes': {}}
	"""
	return {'lastDate': None, 'hashes': {}}


#============================================
def hash_content(content: str) -> str:
	"""
	Get the change-detection digest of a rendered page.

	MD5 matches the digests already stored in lastProcessed.json files.

	Args:
		content (str): Rendered document.

	Returns:
		str: Hex digest.
	"""
	return hashlib.md5(content.encode('utf-8')).hexdigest()


#============================================
def load_run_state(state_path: str) -> dict:
	"""
	Load the run state JSON, or the empty state if the file is absent.

	A file that exists but cannot be parsed is an error, never a silent reset.

	Args:
		state_path (str): State file path.

	Returns:
		dict: Run state.
	"""
	if not os.path.exists(state_path):
		return default_run_state()

	try:
		with open(state_path, 'r', encoding='utf-8') as f:
			raw = json.load(f)
	except json.JSONDecodeError as error:
		raise dailydata_tools.errors.ResourceCorrupt(f'Invalid JSON in {state_path}: {error}') from error
	except UnicodeDecodeError as error:
		raise dailydata_tools.errors.ResourceCorrupt(f'State file is not valid UTF-8: {state_path}: {error}') from error
	except OSError as error:
		raise dailydata_tools.errors.ResourceCorrupt(f'Could not read state file {state_path}: {error}') from error

	if not isinstance(raw, dict):
		raise dailydata_tools.errors.ResourceCorrupt(f'State must be a JSON object: {state_path}')

	last_date = raw.get('lastDate', None)
	if last_date is not None and not isinstance(last_date, str):
		raise dailydata_tools.errors.ResourceCorrupt(f'State lastDate must be a string or null: {state_path}')

	hashes = raw.get('hashes', {})
	if not isinstance(hashes, dict):
		raise dailydata_tools.errors.ResourceCorrupt(f'State hashes must be an object: {state_path}')
	for filename, digest in hashes.items():
		if not isinstance(digest, str):
			raise dailydata_tools.errors.ResourceCorrupt(f'State hash for {filename} must be a string: {state_path}')

	state = dict(raw)
	state['lastDate'] = last_date
	state['hashes'] = dict(hashes)
	return state


#============================================
def should_skip_write(path: str, filename: str, new_hash: str, state: dict) -> bool:
	"""
	Check whether a rendered page can be left as is.

	Skip only when the file is on disk AND its stored hash matches.

	Args:
		path (str): Output file path.
		filename (str): Key in state['hashes'].
		new_hash (str): Digest of the freshly rendered page.
		state (dict): Run state.

	Returns:
		bool: True to skip the write.
	"""
	if not os.path.exists(path):
		return False
	return state['hashes'].get(filename) == new_hash


#============================================
def write_text_file(path: str, content: str):
	"""
	Write a text file, creating the parent directory.

	Args:
		path (str): File path.
		content (str): File content.
	"""
	try:
		parent_dir = os.path.dirname(path)
		if parent_dir:
			os.makedirs(parent_dir, exist_ok=True)
		with open(path, 'w', encoding='utf-8') as f:
			f.write(content)
	except OSError as error:
		raise dailydata_tools.errors.WriteFailure(f'Could not write {path}: {error}') from error


#============================================
def write_text_file_atomic(path: str, content: str):
	"""
	Write a text file through a temp file and os.replace.

	Args:
		path (str): File path.
		content (str): File content.
	"""
	tmp_path = path + '.tmp'
	write_text_file(tmp_path, content)
	try:
		os.replace(tmp_path, path)
	except OSError as error:
		raise dailydata_tools.errors.WriteFailure(f'Could not replace {path}: {error}') from error


#============================================
def save_run_state(state_path: str, state: dict):
	"""
	Write the run state JSON, replacing any previous content.

	Args:
		state_path (str): State file path.
		state (dict): Run state.
	"""
	content = json.dumps(state, indent=2)
	write_text_file_atomic(state_path, content)


if __name__ == '__main__':
	# Simple asserts for new pure functions
	assert hash_content('') == 'd41d8cd98f00b204e9800998ecf8427e'
	assert default_run_state() == {'lastDate': None, 'hashes': {}}
