"""User service: a User CRUD API exposed over REST and GraphQL.

Both protocol front-ends share one access layer so that every operation behaves
the same regardless of how it is called.
"""

__version__ = "1.0.0"
