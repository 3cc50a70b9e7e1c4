import json

import pytest

import dailydata_tools.errors
import dailydata_tools.run_state


def test_missing_state_file_gives_default(tmp_path):
	state = dailydata_tools.run_state.load_run_state(str(tmp_path / 'lastProcessed.json'))
	assert state == {'lastDate': None, 'hashes': {}}


def test_state_roundtrip_file_format(tmp_path):
	path = tmp_path / 'lastProcessed.json'
	state = {'lastDate': '2025-01-03', 'hashes': {'2025-01-03.html': 'abc'}}
	dailydata_tools.run_state.save_run_state(str(path), state)
	assert json.loads(path.read_text(encoding='utf-8')) == state
	assert path.read_text(encoding='utf-8').startswith('{\n  "lastDate"')
	assert not (tmp_path / 'lastProcessed.json.tmp').exists()
	assert dailydata_tools.run_state.load_run_state(str(path)) == state


def test_save_overwrites_previous_state(tmp_path):
	path = tmp_path / 'lastProcessed.json'
	path.write_text('{"lastDate": "old", "hashes": {"a.html": "1", "b.html": "2"}}', encoding='utf-8')
	dailydata_tools.run_state.save_run_state(str(path), {'lastDate': 'new', 'hashes': {}})
	assert json.loads(path.read_text(encoding='utf-8')) == {'lastDate': 'new', 'hashes': {}}


@pytest.mark.parametrize('text', [
	'{not json',
	'[]',
	'{"lastDate": 5, "hashes": {}}',
	'{"lastDate": null, "hashes": []}',
	'{"lastDate": null, "hashes": {"a.html": 1}}',
])
def test_bad_state_is_corrupt(tmp_path, text):
	path = tmp_path / 'lastProcessed.json'
	path.write_text(text, encoding='utf-8')
	with pytest.raises(dailydata_tools.errors.ResourceCorrupt):
		dailydata_tools.run_state.load_run_state(str(path))


def test_hash_content_is_md5_hex():
	digest = dailydata_tools.run_state.hash_content('<html></html>')
	assert len(digest) == 32
	assert digest == dailydata_tools.run_state.hash_content('<html></html>')
	assert digest != dailydata_tools.run_state.hash_content('<html> </html>')


def test_skip_needs_existing_file_and_matching_hash(tmp_path):
	path = tmp_path / 'a.html'
	state = {'lastDate': None, 'hashes': {'a.html': 'h1'}}

	# hash matches but the file is gone
	assert not dailydata_tools.run_state.should_skip_write(str(path), 'a.html', 'h1', state)

	path.write_text('x', encoding='utf-8')
	assert dailydata_tools.run_state.should_skip_write(str(path), 'a.html', 'h1', state)
	assert not dailydata_tools.run_state.should_skip_write(str(path), 'a.html', 'h2', state)
	assert not dailydata_tools.run_state.should_skip_write(str(path), 'b.html', 'h1', state)


def test_write_failure_is_wrapped(tmp_path):
	blocker = tmp_path / 'blocker'
	blocker.write_text('', encoding='utf-8')
	with pytest.raises(dailydata_tools.errors.WriteFailure):
		dailydata_tools.run_state.write_text_file(str(blocker / 'child.html'), 'x')


def test_state_path_that_is_a_directory_is_corrupt(tmp_path):
	path = tmp_path / 'lastProcessed.json'
	path.mkdir()
	with pytest.raises(dailydata_tools.errors.ResourceCorrupt):
		dailydata_tools.run_state.load_run_state(str(path))
