#!/usr/bin/env python3

# Standard Library
import os
import sys
import argparse

# local repo modules
import dailydata_tools.errors
import dailydata_tools.post_render
import dailydata_tools.posts_data
import dailydata_tools.run_state
import dailydata_tools.site_config
import dailydata_tools.sitemap_render


#============================================
def parse_args(argv=None):
	"""
	Parse command-line arguments.

	Args:
		argv (list): Optional argument list (default: sys.argv[1:]).

	Returns:
		argparse.Namespace: Parsed arguments.
	"""
	parser = argparse.ArgumentParser(description='Generate DailyDATA post pages and sitemap from dailydata.csv')

	parser.add_argument(
		'-c', '--config', dest='config_yaml', required=False, type=str,
		default=None,
		help='Optional site config YAML (default: built-in settings)',
	)
	parser.add_argument(
		'-i', '--input', dest='input_csv', required=False, type=str,
		default=None,
		help='Input CSV file (default: dailydata.csv)',
	)
	parser.add_argument(
		'-o', '--posts-dir', dest='posts_dir', required=False, type=str,
		default=None,
		help='Output posts directory (default: posts)',
	)
	parser.add_argument(
		'--no-cache', dest='use_hash_cache', action='store_false',
		help='Write every page and skip the lastProcessed.json state file',
	)
	parser.set_defaults(use_hash_cache=None)

	parser.add_argument(
		'-n', '--dry-run', dest='dry_run', help='Do not write files', action='store_true'
	)
	parser.add_argument(
		'-w', '--write', dest='dry_run', help='Write files (default)', action='store_false'
	)
	parser.set_defaults(dry_run=False)

	args = parser.parse_args(argv)
	return args


#============================================
def build_site_config(args) -> dict:
	"""
	Build the site configuration from defaults, config YAML and flags.

	Args:
		args (argparse.Namespace): Parsed arguments.

	Returns:
		dict: Site configuration.
	"""
	if args.config_yaml:
		site = dailydata_tools.site_config.load_site_config(args.config_yaml)
	else:
		site = dailydata_tools.site_config.default_site_config()

	if args.input_csv:
		site['csv_path'] = args.input_csv
	if args.posts_dir:
		site['posts_dir'] = args.posts_dir
	if args.use_hash_cache is not None:
		site['use_hash_cache'] = args.use_hash_cache
	return site


#============================================
def generate_posts(site: dict, dry_run: bool = False) -> dict:
	"""
	Generate one HTML page per CSV row, the sitemap and the run state.

	Pages whose file exists and whose stored hash matches are skipped when
	site['use_hash_cache'] is set; otherwise every page is written. The state
	file is written last, so a failed run records nothing.

	Args:
		site (dict): Site configuration.
		dry_run (bool): If True, report but do not write files.

	Returns:
		dict: Summary with keys written, skipped, sitemap, state.
	"""
	csv_path = dailydata_tools.site_config.resolve_path(site, 'csv_path')
	posts_dir = dailydata_tools.site_config.resolve_path(site, 'posts_dir')
	sitemap_path = dailydata_tools.site_config.resolve_path(site, 'sitemap_path')
	state_path = None
	if site['use_hash_cache']:
		state_path = dailydata_tools.site_config.resolve_path(site, 'state_path')

	rows = dailydata_tools.posts_data.load_post_rows(csv_path)

	if state_path:
		state = dailydata_tools.run_state.load_run_state(state_path)
	else:
		state = dailydata_tools.run_state.default_run_state()

	if not dry_run:
		try:
			os.makedirs(posts_dir, exist_ok=True)
		except OSError as error:
			raise dailydata_tools.errors.WriteFailure(f'Could not create {posts_dir}: {error}') from error

	prefix = 'DRY-RUN: ' if dry_run else ''
	written = []
	skipped = []
	for index, row in enumerate(rows):
		# neighbors are positional: index+1 is the previous day, index-1 the next
		prev_row = rows[index + 1] if index < len(rows) - 1 else None
		next_row = rows[index - 1] if index > 0 else None

		filename = dailydata_tools.post_render.post_filename(row)
		file_path = os.path.join(posts_dir, filename)
		content = dailydata_tools.post_render.render_post_html(row, prev_row, next_row, site)

		if state_path:
			new_hash = dailydata_tools.run_state.hash_content(content)
			if dailydata_tools.run_state.should_skip_write(file_path, filename, new_hash, state):
				print(f'{prefix}Unchanged, skipped: {filename}')
				skipped.append(filename)
				continue
			state['hashes'][filename] = new_hash

		if not dry_run:
			dailydata_tools.run_state.write_text_file(file_path, content)
		print(f'{prefix}Generated/Updated: {filename}')
		written.append(filename)

	sitemap_xml = dailydata_tools.sitemap_render.render_sitemap_xml(rows, site)
	if not dry_run:
		dailydata_tools.run_state.write_text_file(sitemap_path, sitemap_xml)
	print(f'{prefix}Sitemap generated: {sitemap_path}')

	if state_path:
		state['lastDate'] = dailydata_tools.post_render.field_text(rows[-1], 'date')
		if not dry_run:
			dailydata_tools.run_state.save_run_state(state_path, state)
		print(f'{prefix}State saved: {state_path}')

	print(f'Written: {len(written)}')
	print(f'Skipped: {len(skipped)}')

	summary = {
		'written': written,
		'skipped': skipped,
		'sitemap': sitemap_path,
		'state': state_path,
	}
	return summary


#============================================
def main(argv=None) -> int:
	"""
	Main entrypoint.

	Returns:
		int: Process exit status.
	"""
	args = parse_args(argv)

	try:
		site = build_site_config(args)
		generate_posts(site, dry_run=args.dry_run)
	except dailydata_tools.errors.ResourceMissing as error:
		print(f'ERROR: {error}', file=sys.stderr)
		return 2
	except dailydata_tools.errors.ResourceCorrupt as error:
		print(f'ERROR: {error}', file=sys.stderr)
		return 3
	except dailydata_tools.errors.WriteFailure as error:
		print(f'ERROR: {error}', file=sys.stderr)
		return 4
	return 0


if __name__ == '__main__':
	sys.exit(main())
