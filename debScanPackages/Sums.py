import hashlib

SUM_MD5 = 1 << 0
SUM_SHA1 = 1 << 1
SUM_SHA256 = 1 << 2
SUM_ALL = SUM_MD5 | SUM_SHA1 | SUM_SHA256

# rendering order of the Packages fields, do not sort
SUM_TYPES = (
              ( SUM_MD5, 'MD5sum', hashlib.md5 ),
              ( SUM_SHA1, 'SHA1', hashlib.sha1 ),
              ( SUM_SHA256, 'SHA256', hashlib.sha256 )
            )

CHUNK_SIZE = 4096 * 16


def checkMask( mask ):
  if mask & ~SUM_ALL:
    raise ValueError( 'Unknown checksum flags "{0}"'.format( mask & ~SUM_ALL ) )


def fileSums( wrk, mask ):
  """
  Hash wrk from the current position to the end in one pass, returns the
  'MD5sum: ...\\nSHA1: ...\\nSHA256: ...\\n' block for the algorithms selected in mask
  """
  checkMask( mask )

  hasher_list = [ ( label, factory() ) for ( flag, label, factory ) in SUM_TYPES if mask & flag ]
  if not hasher_list:
    return ''

  buff = wrk.read( CHUNK_SIZE )
  while buff:
    for ( _, hasher ) in hasher_list:
      hasher.update( buff )
    buff = wrk.read( CHUNK_SIZE )

  return ''.join( [ '{0}: {1}\n'.format( label, hasher.hexdigest() ) for ( label, hasher ) in hasher_list ] )
