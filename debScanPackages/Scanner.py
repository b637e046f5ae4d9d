import os
import logging

from debScanPackages.Deb import Deb, ValidationError
from debScanPackages.Members import FormatError
from debScanPackages.Sums import SUM_ALL

"""
see https://wiki.debian.org/DebianRepository/Format#A.22Packages.22_Indices
"""


class PackagesScanner():
  def __init__( self, prefix='', sum_mask=SUM_ALL ):
    super().__init__()
    self.prefix = prefix
    self.sum_mask = sum_mask
    self.entry_list = {}

  def addEntry( self, file_path ):
    filename = os.path.basename( file_path )
    logging.debug( 'scan: Got Entry for package: %s', filename )

    try:
      with open( file_path, 'rb' ) as wrk:
        stanza = Deb( wrk ).metaData( self.sum_mask, self.prefix )

    except ( FormatError, ValidationError, IOError ) as e:
      logging.warning( 'scan: unable to read "%s", "%s", skipping...', file_path, e )
      return False

    self.entry_list[ filename ] = stanza
    return True

  def removeEntry( self, filename ):
    try:
      del self.entry_list[ filename ]
    except KeyError:
      logging.warning( 'scan: unable to remove entry "%s", ignored.', filename )

  def packages( self ):
    return b'\n'.join( [ self.entry_list[ filename ] for filename in sorted( self.entry_list ) ] )
