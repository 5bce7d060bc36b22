"""auth/ -- Authentication package for PizzaStore.

Layer rule: auth/ imports only stdlib, third-party libraries, and core/.
It does NOT import from api/ or pizza/.
api/ imports from auth/, not the other way around.
"""
