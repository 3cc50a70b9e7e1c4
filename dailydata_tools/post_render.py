#!/usr/bin/env python3

# Row field values are interpolated as-is, without HTML escaping.


#============================================
def field_text(row: dict, key: str) -> str:
	"""
	Get a row field as text, empty when absent.

	Args:
		row (dict): Row dict.
		key (str): Column name.

	Returns:
		str: Value or ''.
	"""
	return str(row.get(key, '') or '')


#============================================
def post_filename(row: dict) -> str:
	"""
	Get the output filename for a row.

	Args:
		row (dict): Row dict.

	Returns:
		str: '<date>.html'.
	"""
	return field_text(row, 'date') + '.html'


#============================================
def render_neighbor_link(neighbor_row: dict, site: dict, kind: str, label: str) -> str:
	"""
	Render a sidebar figure link to a neighboring day.

	Args:
		neighbor_row (dict): Neighbor row dict, or None.
		site (dict): Site configuration.
		kind (str): 'prev' or 'next', used in css classes.
		label (str): Heading text.

	Returns:
		str: HTML fragment, or '' when there is no neighbor.
	"""
	if not neighbor_row:
		return ''

	date_str = field_text(neighbor_row, 'date')
	alt_word = 'Previous' if kind == 'prev' else 'Next'
	figures_path = site['figures_path']

	out = ''
	out += f'<div class="{kind}-figure-container">\n'
	out += f'                <h3 class="{kind}-label">{label}</h3>\n'
	out += f'                <a href="{date_str}.html">\n'
	out += f'                    <img src="{figures_path}/{date_str}.png" alt="{alt_word} figure for {date_str}" class="{kind}-figure" />\n'
	out += '                </a>\n'
	out += '            </div>'
	return out


#============================================
def render_prev_link(prev_row: dict, site: dict) -> str:
	"""
	Render the "Previous Day's" sidebar link.
	"""
	return render_neighbor_link(prev_row, site, 'prev', "Previous Day's")


#============================================
def render_next_link(next_row: dict, site: dict) -> str:
	"""
	Render the "Next Day's" sidebar link.
	"""
	return render_neighbor_link(next_row, site, 'next', "Next Day's")


#============================================
def render_nav_items(site: dict) -> str:
	"""
	Render the header navigation list items.

	Args:
		site (dict): Site configuration.

	Returns:
		str: <li> lines.
	"""
	lines = []
	for link in site['nav_links']:
		lines.append(f'                <li><a href="{link["href"]}">{link["label"]}</a></li>')
	return '\n'.join(lines)


#============================================
def render_datasource(row: dict) -> str:
	"""
	Render the data source line text; no label when the field is absent.
	"""
	datasource = field_text(row, 'datasource')
	if not datasource:
		return ''
	return f'Data source: {datasource}'


#============================================
def render_post_html(row: dict, prev_row: dict, next_row: dict, site: dict) -> str:
	"""
	Render the full HTML page for one daily post.

	Args:
		row (dict): Row dict for this day.
		prev_row (dict): Row dict for the previous day, or None.
		next_row (dict): Row dict for the next day, or None.
		site (dict): Site configuration.

	Returns:
		str: HTML document.
	"""
	date_str = field_text(row, 'date')
	title = field_text(row, 'title')
	page_title = title or site['site_name']
	caption = field_text(row, 'caption')
	description = field_text(row, 'description')

	logo_path = site['logo_path']
	figures_path = site['figures_path']

	out = ''
	out += '<!DOCTYPE html>\n'
	out += '<html lang="en">\n'
	out += '<head>\n'
	out += '    <meta charset="UTF-8" />\n'
	out += f'    <title>{page_title} - {date_str}</title>\n'
	out += f'    <link rel="icon" href="{logo_path}" type="image/png" />\n'
	out += f'    <link rel="stylesheet" href="{site["stylesheet_path"]}" />\n'
	out += '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
	out += f'    <meta name="description" content="{description}" />\n'
	out += '</head>\n'
	out += '<body>\n'
	out += '    <header class="header">\n'
	out += '        <div class="logo-container">\n'
	out += f'            <img src="{logo_path}" alt="Logo" class="logo" />\n'
	out += f'            <h1 class="site-title"><a href="{site["home_href"]}">{site["site_name"]}</a></h1>\n'
	out += '        </div>\n'
	out += '        <nav class="navbar">\n'
	out += '            <ul>\n'
	out += render_nav_items(site) + '\n'
	out += '            </ul>\n'
	out += '        </nav>\n'
	out += '    </header>\n'
	out += '\n'
	out += '    <div class="container">\n'
	out += '        <div class="main-content">\n'
	out += f'            <h2 class="main-title">{title}</h2>\n'
	out += f'            <div class="date">{date_str}</div>\n'
	out += f'            <img src="{figures_path}/{date_str}.png" alt="Figure for {date_str}" class="main-figure" />\n'
	out += '            <div class="text">\n'
	out += f'                <p class="caption">{caption}</p>\n'
	out += '                <br />\n'
	out += '                <hr />\n'
	out += '                <br />\n'
	out += f'                <p class="description">{description}</p>\n'
	out += '                <br />\n'
	out += f'                <p class="datasource">{render_datasource(row)}</p>\n'
	out += '                <br />\n'
	out += f'                <p class="disclaimer"><strong>{site["disclaimer"]}</strong></p>\n'
	out += '            </div>\n'
	out += '        </div>\n'
	out += '\n'
	out += '        <aside class="sidebar">\n'
	out += f'            {render_prev_link(prev_row, site)}\n'
	out += f'            {render_next_link(next_row, site)}\n'
	out += '        </aside>\n'
	out += '    </div>\n'
	out += '\n'
	out += '    <footer class="footer">\n'
	out += f'        <img src="{logo_path}" alt="Logo Small" class="footer-logo" />\n'
	out += f'        <p>{site["copyright"]}</p>\n'
	out += '    </footer>\n'
	out += '</body>\n'
	out += '</html>'
	return out


if __name__ == '__main__':
	# Simple asserts for new pure functions
	assert post_filename({'date': '2025-01-01'}) == '2025-01-01.html'
	assert render_datasource({'datasource': ''}) == ''
	assert render_prev_link(None, {}) == ''
