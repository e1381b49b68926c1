"""
Access levels and restriction values used by record privacy rules

A record is visible when its restriction level is >= the viewer's access level.
"""

PRIV_PRIVATE = 2   # visitors
PRIV_USER = 1      # members of the tree
PRIV_NONE = 0      # managers
PRIV_HIDE = -1     # bypasses privacy checks

RESN_LEVELS = {
    'none': PRIV_PRIVATE,
    'privacy': PRIV_USER,
    'confidential': PRIV_NONE,
    'hidden': PRIV_HIDE,
}

# canedit values of a user in a tree
ROLE_NONE = 'none'
ROLE_ACCESS = 'access'
ROLE_EDIT = 'edit'
ROLE_ACCEPT = 'accept'
ROLE_ADMIN = 'admin'

MEMBER_ROLES = (ROLE_ACCESS, ROLE_EDIT, ROLE_ACCEPT, ROLE_ADMIN)
