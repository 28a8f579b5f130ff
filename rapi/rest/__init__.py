""" This module contains the request pipeline for the Revolt REST API,
every endpoint wrapper goes through `RESTClient.execute`, which
authenticates the call, encodes the body and turns error responses
into typed exceptions.
"""

from .auth import *
from .builders import *
from .classifier import *
from .client import *
from .codec import *
from .config import *
from .endpoints import *
from .errors import *
from .request import *
from .response import *
from .route import *
