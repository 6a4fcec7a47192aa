"""Normalization package.

One module per kind of value the business forms accept.  Every
normalizer is a pure function over a raw string (or number) that never
raises on malformed input:

* ``rut_normalizer``: Chilean RUT clean / validate / format
* ``sku_normalizer``: product codes and barcodes
* ``slug_normalizer``: URL slugs for organizations
* ``cash_rounding``: cash payment rounding to the nearest 10
"""
