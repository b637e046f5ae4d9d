import io
import os
import shutil
import logging
import posixpath

from debScanPackages.Members import ArReader, TarReader, decompress, findMember
from debScanPackages.Stanza import countPackage, insertPoint, splice
from debScanPackages.Sums import SUM_ALL, checkMask, fileSums

CONTROL_TAR = 'control.tar.gz'
CONTROL_FILE = 'control'


class ValidationError( Exception ):
  pass


class MissingPackageField( ValidationError ):
  pass


class MultiplePackageField( ValidationError ):
  pass


class Deb():
  def __init__( self, wrk ):
    super().__init__()
    self.wrk = wrk

  @property
  def name( self ):
    return getattr( self.wrk, 'name', '<stream>' )

  @property
  def filename( self ):
    try:
      return os.path.basename( self.wrk.name )
    except AttributeError:
      raise IOError( 'Archive stream has no file name for the Filename field' )

  def _checkFile( self ):
    if self.wrk.closed:
      raise IOError( 'Archive file is closed' )

    if not self.wrk.seekable():
      raise IOError( 'Archive file "{0}" is not seekable'.format( self.name ) )

  def controlFile( self ):
    """
    Returns the raw bytes of the control file, b'' if the archive has no
    control.tar.gz or the tarball has no control.
    """
    self._checkFile()
    buff = io.BytesIO()

    def _copyControl( name, body ):
      shutil.copyfileobj( body, buff )

    def _readControlTar( name, body ):
      findMember( TarReader( decompress( CONTROL_TAR, body ) ), CONTROL_FILE, _copyControl )

    self.wrk.seek( 0 )
    findMember( ArReader( self.wrk ), CONTROL_TAR, _readControlTar )

    return buff.getvalue()

  def metaData( self, sum_mask=SUM_ALL, prefix='' ):
    """
    Returns the control stanza with Filename, Size and the checksums selected by
    sum_mask added before Section, Priority or Description (first one found).
    """
    checkMask( sum_mask )
    control = self.controlFile()

    count = countPackage( control )
    if count == 0:
      raise MissingPackageField( 'No Package field in control file of "{0}"'.format( self.name ) )
    elif count > 1:
      raise MultiplePackageField( 'Multiple Package fields in control file of "{0}"'.format( self.name ) )

    self.wrk.seek( 0 )

    point = insertPoint( control )
    if point is None:
      logging.warning( 'deb: No Section, Priority or Description in "%s", Filename, Size and sums not added', self.name )
      return control

    size = os.fstat( self.wrk.fileno() ).st_size
    filename = posixpath.normpath( posixpath.join( prefix, self.filename ) )
    logging.debug( 'deb: Got control for "%s", size: %s, inserting at: %s', filename, size, point )

    fields = 'Filename: {0}\nSize: {1}\n'.format( filename, size )
    fields += fileSums( self.wrk, sum_mask )

    return splice( control, point, fields.encode() )
