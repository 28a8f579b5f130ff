""" Wire models for the resources the REST API deals with. Field names
follow Python conventions, the server's names are kept as aliases.
"""

from .base import *
from .bot import *
from .channel import *
from .embed import *
from .file import *
from .instance import *
from .invite import *
from .message import *
from .permissions import *
from .user import *
