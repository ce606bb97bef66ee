"""
Value codec package.

- column_info: the Field record handed to cast functions
- type_conversion: wire -> Python casting (`cast`, `inflate_dates`) and
  Python -> wire parameter formatting (`format_date`, `convert_params`)

Decoding happens inside the execution client, which calls the configured
cast function for every field. Encoding happens in the connection right
before a statement is sent, and only when no custom `format` is configured.
"""
from planetscale_dialect.adapters.column_info import Field
from planetscale_dialect.adapters.type_conversion import cast, convert_params
from planetscale_dialect.adapters.type_conversion import format_date
from planetscale_dialect.adapters.type_conversion import inflate_dates

__all__ = ['Field', 'cast', 'convert_params', 'format_date', 'inflate_dates']
