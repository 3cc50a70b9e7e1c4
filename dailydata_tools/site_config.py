#!/usr/bin/env python3

# Standard Library
import os
import copy

# PIP3 modules
import yaml

# local repo modules
import dailydata_tools.errors


DEFAULT_SITE_CONFIG = {
	# paths, relative to base_dir unless absolute
	'base_dir': '.',
	'csv_path': 'dailydata.csv',
	'posts_dir': 'posts',
	'sitemap_path': 'sitemap.xml',
	'state_path': 'lastProcessed.json',
	'use_hash_cache': True,
	# public urls
	'site_origin': 'https://thedailydata.org',
	'posts_url_path': 'posts',
	# page template constants
	'site_name': 'The DailyDATA',
	'home_href': '../index.html',
	'logo_path': '../LOGO.png',
	'stylesheet_path': '../styles.css',
	'figures_path': '../Figures',
	'nav_links': [
		{'href': '../about.html', 'label': 'About'},
		{'href': '../contact.html', 'label': 'Contact'},
		{'href': '../people.html', 'label': 'People'},
		{'href': '../terms-of-use.html', 'label': 'Terms of Use'},
	],
	'disclaimer': '*These figures have not yet been formally peer reviewed and are intended as exploratory',
	'copyright': '&copy; 2025 The DailyDATA. All rights reserved.',
}

PATH_KEYS = ('csv_path', 'posts_dir', 'sitemap_path', 'state_path')


#============================================
def default_site_config() -> dict:
	"""
	Get a fresh copy of the built-in site configuration.

	Returns:
		dict: Site configuration.
	"""
	return copy.deepcopy(DEFAULT_SITE_CONFIG)


#============================================
def normalize_nav_links(nav_raw) -> list:
	"""
	Normalize nav links into a list of {href, label} dicts.

	Allowed inputs:
	- list[dict] with href/label keys
	- list[list] of [href, label] pairs

	Args:
		nav_raw: Raw nav_links value from YAML.

	Returns:
		list: List of dicts with keys 'href' and 'label'.
	"""
	if nav_raw is None:
		return []
	if not isinstance(nav_raw, list):
		raise dailydata_tools.errors.ResourceCorrupt('nav_links must be a list')

	out = []
	for item in nav_raw:
		if isinstance(item, dict):
			href = str(item.get('href', '') or '').strip()
			label = str(item.get('label', '') or '').strip()
		elif isinstance(item, (list, tuple)) and len(item) == 2:
			href = str(item[0] or '').strip()
			label = str(item[1] or '').strip()
		else:
			raise dailydata_tools.errors.ResourceCorrupt(f'Invalid nav_links entry: {item!r}')
		if not href or not label:
			raise dailydata_tools.errors.ResourceCorrupt(f'nav_links entry needs href and label: {item!r}')
		out.append({'href': href, 'label': label})
	return out


#============================================
def merge_site_config(overrides: dict, base_dir: str = None) -> dict:
	"""
	Overlay known keys onto the default site configuration.

	Args:
		overrides (dict): Keys to replace.
		base_dir (str): Optional base directory, wins over overrides['base_dir'].

	Returns:
		dict: Site configuration.
	"""
	site = default_site_config()
	if overrides is None:
		overrides = {}
	if not isinstance(overrides, dict):
		raise dailydata_tools.errors.ResourceCorrupt('Site config must be a mapping')

	unknown = sorted(str(k) for k in overrides if k not in DEFAULT_SITE_CONFIG)
	if unknown:
		raise dailydata_tools.errors.ResourceCorrupt(f'Unknown site config keys: {", ".join(unknown)}')

	for key, value in overrides.items():
		if key == 'nav_links':
			site[key] = normalize_nav_links(value)
		elif key == 'use_hash_cache':
			if not isinstance(value, bool):
				raise dailydata_tools.errors.ResourceCorrupt(f'use_hash_cache must be true or false, got {value!r}')
			site[key] = value
		else:
			site[key] = str(value if value is not None else '').strip()

	if base_dir is not None:
		site['base_dir'] = base_dir
	site['site_origin'] = site['site_origin'].rstrip('/')
	site['posts_url_path'] = site['posts_url_path'].strip('/')
	return site


#============================================
def load_site_config(yaml_path: str, base_dir: str = None) -> dict:
	"""
	Read a site config YAML file and overlay it onto the defaults.

	Args:
		yaml_path (str): YAML file path.
		base_dir (str): Optional base directory for relative paths.

	Returns:
		dict: Site configuration.
	"""
	if not os.path.isfile(yaml_path):
		raise dailydata_tools.errors.ResourceMissing(f'Site config not found: {yaml_path}')

	with open(yaml_path, 'r', encoding='utf-8') as f:
		try:
			raw = yaml.safe_load(f)
		except yaml.YAMLError as error:
			raise dailydata_tools.errors.ResourceCorrupt(f'Invalid YAML in {yaml_path}: {error}') from error
		except UnicodeDecodeError as error:
			raise dailydata_tools.errors.ResourceCorrupt(f'Site config is not valid UTF-8: {yaml_path}: {error}') from error

	return merge_site_config(raw, base_dir=base_dir)


#============================================
def resolve_path(site: dict, key: str) -> str:
	"""
	Resolve a configured path against base_dir.

	Args:
		site (dict): Site configuration.
		key (str): One of PATH_KEYS.

	Returns:
		str: Path on disk.
	"""
	path = site[key]
	if os.path.isabs(path):
		return path
	return os.path.join(site['base_dir'], path)


if __name__ == '__main__':
	# Simple asserts for new pure functions
	assert normalize_nav_links([['a.html', 'A']]) == [{'href': 'a.html', 'label': 'A'}]
	assert merge_site_config({'site_origin': 'https://example.org/'})['site_origin'] == 'https://example.org'
