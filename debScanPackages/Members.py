import gzip
import tarfile
import zlib

import arpy

"""
Sequential member lookup for the two containers a .deb is made of, the outer
ar archive and the control tarball.  Only the first matching member is used,
everything else is skipped over.
"""

FORMAT_ERRORS = ( arpy.ArchiveFormatError, tarfile.TarError, zlib.error, EOFError, OSError )


class FormatError( Exception ):
  pass


class MemberReader():
  def nextMember( self ):
    """
    Advance to the next member, returns its name, or None at the end of the container
    """
    return None

  def body( self ):
    return None

  def matches( self, name, target ):
    return name == target


class ArReader( MemberReader ):
  def __init__( self, wrk ):
    super().__init__()
    self.wrk = wrk
    self._archive = None
    self._current = None

  def nextMember( self ):
    if self._archive is None:
      self._archive = arpy.Archive( fileobj=self.wrk )  # NOTE: do not close, it would close wrk

    while True:
      header = self._archive.read_next_header()
      if header is None:
        self._current = None
        return None

      name = getattr( header, 'name', None )
      if name not in self._archive.archived_files:  # GNU symbol and long name tables
        continue

      self._current = self._archive.archived_files[ name ]
      return name.decode( errors='replace' )

  def body( self ):
    return self._current

  def matches( self, name, target ):
    return name.startswith( target )


class TarReader( MemberReader ):
  def __init__( self, wrk ):
    super().__init__()
    self.wrk = wrk
    self._tar = None
    self._current = None

  def nextMember( self ):
    if self._tar is None:
      self._tar = tarfile.open( fileobj=self.wrk, mode='r|' )

    info = self._tar.next()
    while info is not None and not info.isfile():
      info = self._tar.next()

    if info is None:
      self._current = None
      return None

    self._current = info
    return info.name

  def body( self ):
    return self._tar.extractfile( self._current )

  def matches( self, name, target ):
    return name.endswith( target )


def decompress( name, stream ):
  if name.endswith( '.gz' ):
    return gzip.GzipFile( fileobj=stream, mode='rb' )

  return stream


def findMember( reader, target, cb ):
  """
  Walk the members of reader until one matches target, then return cb( name, body ).
  Running out of members is not an error, None is returned and cb is never called.
  """
  try:
    while True:
      name = reader.nextMember()
      if name is None:
        return None

      if reader.matches( name, target ):
        return cb( name, reader.body() )

  except FORMAT_ERRORS as e:
    raise FormatError( 'Error reading "{0}" from {1}: "{2}"'.format( target, type( reader ).__name__, e ) ) from e
