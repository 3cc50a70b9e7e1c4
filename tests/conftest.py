import pytest

import dailydata_tools.site_config


THREE_DAY_CSV = (
	'Date,Title,Caption,Description,DataSource\n'
	'2025-01-01,New Year,Fireworks,Launches per hour,City records\n'
	'2025-01-02,Day Two,Rain,Rainfall in mm,Weather service\n'
	'2025-01-03,Day Three,Sun,Hours of sunshine,\n'
)


@pytest.fixture
def site(tmp_path):
	return dailydata_tools.site_config.merge_site_config({}, base_dir=str(tmp_path))


@pytest.fixture
def write_csv(tmp_path):
	def _write(text=THREE_DAY_CSV):
		path = tmp_path / 'dailydata.csv'
		path.write_text(text, encoding='utf-8')
		return path
	return _write
