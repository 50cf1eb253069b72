# Schemas package (re-export feature modules for stable imports)
from .common.common import *
from .customers.customer import *
from .images.image import *
