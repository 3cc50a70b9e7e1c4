#!/usr/bin/env python3

# Standard Library
import os

# local repo modules
import dailydata_tools.errors


#============================================
def read_csv_file(csv_path: str) -> str:
	"""
	Read the daily data CSV as UTF-8 text.

	Args:
		csv_path (str): CSV file path.

	Returns:
		str: File content.
	"""
	if not os.path.isfile(csv_path):
		raise dailydata_tools.errors.ResourceMissing(f'CSV file not found: {csv_path}')
	try:
		with open(csv_path, 'r', encoding='utf-8') as f:
			text = f.read()
	except UnicodeDecodeError as error:
		raise dailydata_tools.errors.ResourceCorrupt(f'CSV file is not valid UTF-8: {csv_path}: {error}') from error
	return text


#============================================
def split_csv_line(line: str) -> list:
	"""
	Split one CSV line on commas and trim each value.

	No quoting support: a comma inside a value starts a new column.

	Args:
		line (str): One line of CSV text.

	Returns:
		list: Trimmed values.
	"""
	return [value.strip() for value in line.split(',')]


#============================================
def parse_csv_text(csv_text: str) -> list:
	"""
	Parse daily data CSV text into row dicts.

	The first line is the header. Header names are lower-cased and become
	row keys. Short rows leave trailing keys out; extra values are dropped.

	Args:
		csv_text (str): Raw CSV text.

	Returns:
		list: Row dicts in file order.
	"""
	text = str(csv_text or '').strip()
	if not text:
		raise dailydata_tools.errors.EmptyInput('CSV input is empty')

	lines = text.split('\n')
	headers = [h.lower() for h in split_csv_line(lines[0])]
	if 'date' not in headers:
		raise dailydata_tools.errors.ResourceCorrupt('CSV header has no date column')

	rows = []
	for line_number, line in enumerate(lines[1:], start=2):
		if not line.strip():
			continue
		values = split_csv_line(line)
		row = {}
		for i, header in enumerate(headers):
			if i < len(values):
				row[header] = values[i]
		if not row.get('date'):
			raise dailydata_tools.errors.ResourceCorrupt(f'CSV line {line_number} has no date value')
		rows.append(row)

	if not rows:
		raise dailydata_tools.errors.EmptyInput('CSV input has a header but no data rows')
	return rows


#============================================
def load_post_rows(csv_path: str) -> list:
	"""
	Read and parse the daily data CSV.

	Args:
		csv_path (str): CSV file path.

	Returns:
		list: Row dicts in file order.
	"""
	csv_text = read_csv_file(csv_path)
	return parse_csv_text(csv_text)


if __name__ == '__main__':
	# Simple asserts for new pure functions
	assert split_csv_line(' a , b ,c\r') == ['a', 'b', 'c']
	assert parse_csv_text('Date,Title\n2025-01-01') == [{'date': '2025-01-01'}]
