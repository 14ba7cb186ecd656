# This file marks the services package for the layer between routers and repositories.
# Service modules are the place for business rules that do not belong to HTTP or SQL code.
