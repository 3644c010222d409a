# This file tells Python that the 'routes' directory is a package.
# It also gathers all routers for easier import in main.py.

from . import auth
from . import customers
from . import custom_fields
from . import dashboard
from . import followups
from . import forms
from . import health
from . import leads
from . import orders
from . import quotations
from . import settings
from . import todos
from . import views
