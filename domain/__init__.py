"""Describes the onion recipe domain. Centres around the `FoodService`.

Three layers, called strictly inwards:

- models: plain records (users, recipes, ingredients) that know how to
  render themselves.
- repository: per-entity accessors. There is no store behind them, they
  fabricate records with `domain.fakes`.
- services: the use cases. One of them, fetching a user's recipes.

Auth is a stand-in too. A session is valid or it is not, and nobody checks
the token.
"""
