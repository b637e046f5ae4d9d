from debScanPackages.Stanza import countPackage, insertPoint, splice


def test_count():
  assert countPackage( b'Version: 1\n' ) == 0
  assert countPackage( b'Package: a\nVersion: 1\n' ) == 1
  assert countPackage( b'Package: a\n\nPackage: b\n' ) == 2
  # raw substring match, not anchored to the field name
  assert countPackage( b'Package: a\nDescription: Package manager\n' ) == 2


def test_insert_point():
  control = b'Package: a\nSection: web\nPriority: optional\nDescription: a\n'
  assert insertPoint( control ) == control.index( b'Section' )

  control = b'Package: a\nPriority: optional\nDescription: a\n'
  assert insertPoint( control ) == control.index( b'Priority' )

  control = b'Package: a\nDescription: a\n'
  assert insertPoint( control ) == control.index( b'Description' )

  assert insertPoint( b'Package: a\nVersion: 1\n' ) is None


def test_insert_point_last():
  control = b'Package: a\nSection: web\nDescription: moved from the old Section\n'
  assert insertPoint( control ) == control.rindex( b'Section' )
  assert insertPoint( control ) > control.index( b'Description' )


def test_splice():
  control = b'Package: a\nDescription: a\n'
  point = insertPoint( control )
  assert splice( control, point, b'Size: 1\n' ) == b'Package: a\nSize: 1\nDescription: a\n'
  assert splice( control, point, b'' ) == control
