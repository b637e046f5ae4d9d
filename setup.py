#!/usr/bin/env python3

import os
from setuptools import setup
from setuptools.command.build_py import build_py


class build( build_py ):
  def run( self ):
    if getattr( self, 'editable_mode', False ):  # pip install -e, sources are used in place
      return

    # get .pys
    for package in self.packages:  # derived from build_py.run
      package_dir = self.get_package_dir( package )
      modules = self.find_package_modules( package, package_dir )
      for ( package2, module, module_file ) in modules:
        assert package == package2
        if os.path.basename( module_file ).endswith( '_test.py' ) or os.path.basename( module_file ) in ( 'tests.py', 'conftest.py' ):
          continue
        self.build_module( module, module_file, package )


setup( name='deb-scanpackages',
       version='0.9',
       description='Packages index entries for Debian binary packages, dpkg-scanpackages style',
       author='Peter Howe',
       author_email='peter.howe@emc.com',
       packages=[ 'debScanPackages' ],
       install_requires=[ 'arpy' ],
       extras_require={ 'test': [ 'pytest' ] },
       python_requires='>=3.8',
       cmdclass={ 'build_py': build }
       )
