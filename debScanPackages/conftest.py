import pytest

from debScanPackages.tests import HELLO_CONTROL, debArchive


@pytest.fixture
def make_deb( tmp_path ):
  def _make( control=HELLO_CONTROL, filename='hello-world_1.0.0-1_amd64.deb', **kwargs ):
    file_path = tmp_path / filename
    file_path.write_bytes( debArchive( control, **kwargs ) )
    return str( file_path )

  return _make
