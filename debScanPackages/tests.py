import io
import gzip
import tarfile

HELLO_CONTROL = b'''Package: hello-world
Version: 1.0.0-1
Architecture: amd64
Maintainer: Pavel Rezunenko <paulrez@gmail.com>
Installed-Size: 7
Depends: php
Conflicts: python
Description: This is test package
'''

def arMember( name, data ):
  header = '{0:<16}{1:<12}{2:<6}{3:<6}{4:<8}{5:<10}`\n'.format( name, 0, 0, 0, 100644, len( data ) ).encode()
  if len( data ) % 2:
    data += b'\n'

  return header + data

def arArchive( member_list ):
  return b'!<arch>\n' + b''.join( [ arMember( name, data ) for ( name, data ) in member_list ] )

def tarArchive( member_list ):
  buff = io.BytesIO()
  tar = tarfile.open( fileobj=buff, mode='w' )
  for ( name, data ) in member_list:
    info = tarfile.TarInfo( name )
    info.size = len( data )
    tar.addfile( info, io.BytesIO( data ) )
  tar.close()

  return buff.getvalue()

def debArchive( control, control_name='./control', control_tar='control.tar.gz' ):
  control_tar_data = tarArchive( [ ( './md5sums', b'' ), ( control_name, control ) ] )
  if control_tar.endswith( '.gz' ):
    control_tar_data = gzip.compress( control_tar_data, mtime=0 )

  return arArchive( [
                      ( 'debian-binary', b'2.0\n' ),
                      ( control_tar, control_tar_data ),
                      ( 'data.tar.gz', gzip.compress( tarArchive( [ ( './usr/bin/hello', b'#!/bin/sh\necho hello\n' ) ] ), mtime=0 ) )
                    ] )

