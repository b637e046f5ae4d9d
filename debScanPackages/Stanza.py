"""
Byte level editing of a control stanza, existing lines are never touched.
"""

PACKAGE_FIELD = b'Package'

# searched in this order, the first one found anywhere wins
BREAK_POINTS = ( b'Section', b'Priority', b'Description' )


def countPackage( control ):
  # NOTE: raw substring count, "Package" in other fields or the Description counts too
  return control.count( PACKAGE_FIELD )


def insertPoint( control ):
  for field in BREAK_POINTS:
    point = control.rfind( field )
    if point > -1:
      return point

  return None


def splice( control, point, extra ):
  return control[ :point ] + extra + control[ point: ]
