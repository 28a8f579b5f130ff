""" Typed wrappers, one per REST endpoint. They only pick the route, the
body and the type to decode, everything else is `RESTClient.execute`.
"""

from .bots import *
from .channels import *
from .users import *
