import pytest

import dailydata_tools.errors
import dailydata_tools.site_config
import dailydata_tools.sitemap_render


SITE = dailydata_tools.site_config.default_site_config()
ROWS = [{'date': '2025-01-01'}, {'date': '2025-01-03'}, {'date': '2025-01-02'}]


def test_root_entry_uses_last_row_date():
	xml = dailydata_tools.sitemap_render.render_sitemap_xml(ROWS, SITE)
	root_entry = xml.split('</url>')[0]
	assert '<loc>https://thedailydata.org/</loc>' in root_entry
	assert '<lastmod>2025-01-02</lastmod>' in root_entry
	assert '<priority>1.0</priority>' in root_entry
	assert '<changefreq>daily</changefreq>' in root_entry


def test_post_entries_follow_row_order():
	xml = dailydata_tools.sitemap_render.render_sitemap_xml(ROWS, SITE)
	locs = [line.strip() for line in xml.splitlines() if '<loc>' in line]
	assert locs == [
		'<loc>https://thedailydata.org/</loc>',
		'<loc>https://thedailydata.org/posts/2025-01-01.html</loc>',
		'<loc>https://thedailydata.org/posts/2025-01-03.html</loc>',
		'<loc>https://thedailydata.org/posts/2025-01-02.html</loc>',
	]
	assert xml.count('<priority>0.9</priority>') == 3


def test_sitemap_document_shape():
	xml = dailydata_tools.sitemap_render.render_sitemap_xml(ROWS, SITE)
	assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
	assert '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">' in xml
	assert xml.endswith('</urlset>\n')
	assert xml.count('<url>') == 4


def test_loc_is_xml_escaped():
	site = dailydata_tools.site_config.merge_site_config({'site_origin': 'https://example.org/?a=1&b=2'})
	xml = dailydata_tools.sitemap_render.render_sitemap_xml([{'date': 'd'}], site)
	assert 'a=1&amp;b=2' in xml


def test_empty_rows_rejected():
	with pytest.raises(dailydata_tools.errors.EmptyInput):
		dailydata_tools.sitemap_render.render_sitemap_xml([], SITE)
