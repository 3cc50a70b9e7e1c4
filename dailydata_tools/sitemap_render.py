#!/usr/bin/env python3

# Standard Library
import html

# local repo modules
import dailydata_tools.errors
import dailydata_tools.post_render


SITEMAP_XMLNS = 'http://www.sitemaps.org/schemas/sitemap/0.9'
ROOT_PRIORITY = '1.0'
POST_PRIORITY = '0.9'
CHANGEFREQ = 'daily'


#============================================
def post_url(row: dict, site: dict) -> str:
	"""
	Get the public URL of a post page.

	Args:
		row (dict): Row dict.
		site (dict): Site configuration.

	Returns:
		str: Fully-qualified URL.
	"""
	filename = dailydata_tools.post_render.post_filename(row)
	posts_url_path = site['posts_url_path']
	if posts_url_path:
		return f'{site["site_origin"]}/{posts_url_path}/{filename}'
	return f'{site["site_origin"]}/{filename}'


#============================================
def render_sitemap_url(loc: str, lastmod: str, priority: str, changefreq: str = CHANGEFREQ) -> str:
	"""
	Render one <url> entry.

	Args:
		loc (str): Page URL.
		lastmod (str): Last-modified date.
		priority (str): Priority text.
		changefreq (str): Change frequency.

	Returns:
		str: XML lines.
	"""
	out = ''
	out += '  <url>\n'
	out += f'    <loc>{html.escape(loc, quote=False)}</loc>\n'
	out += f'    <lastmod>{html.escape(lastmod, quote=False)}</lastmod>\n'
	out += f'    <changefreq>{changefreq}</changefreq>\n'
	out += f'    <priority>{priority}</priority>\n'
	out += '  </url>\n'
	return out


#============================================
def render_sitemap_xml(rows: list, site: dict) -> str:
	"""
	Render the sitemap: the home page first, then every post in row order.

	The home page lastmod is the date of the last row, not the newest date.

	Args:
		rows (list): Row dicts in file order.
		site (dict): Site configuration.

	Returns:
		str: Sitemap XML.
	"""
	if not rows:
		raise dailydata_tools.errors.EmptyInput('Sitemap needs at least one row')

	last_date = dailydata_tools.post_render.field_text(rows[-1], 'date')

	out = ''
	out += '<?xml version="1.0" encoding="UTF-8"?>\n'
	out += f'<urlset xmlns="{SITEMAP_XMLNS}">\n'
	out += render_sitemap_url(site['site_origin'] + '/', last_date, ROOT_PRIORITY)
	for row in rows:
		date_str = dailydata_tools.post_render.field_text(row, 'date')
		out += render_sitemap_url(post_url(row, site), date_str, POST_PRIORITY)
	out += '</urlset>\n'
	return out


if __name__ == '__main__':
	# Simple asserts for new pure functions
	site = {'site_origin': 'https://example.org', 'posts_url_path': 'posts'}
	assert post_url({'date': '2025-01-01'}, site) == 'https://example.org/posts/2025-01-01.html'
