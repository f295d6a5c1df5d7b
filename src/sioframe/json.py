''' Wrapper module to select the JSON library used to handle the equivalent
    of :func:`json.loads` and :func:`json.dumps`. The library is chosen once,
    at import time, by the SIOFRAME_JSON environment variable: 'msgspec'
    (the default), 'orjson', or 'json' for the standard library.
'''

import os

backend = os.environ.get('SIOFRAME_JSON', 'msgspec')

if backend == 'msgspec':
    import msgspec
elif backend == 'orjson':
    import orjson
elif backend == 'json':
    import json
else:
    raise ImportError('unknown SIOFRAME_JSON backend: ' + repr(backend))


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. To
# maintain alignment all 'dumps' methods need to do so as well.

def json_dumps(*args, **kwargs):
    kwargs.setdefault('ensure_ascii', False)
    kwargs.setdefault('separators', (',', ':'))
    return json.dumps(*args, **kwargs).encode()

if backend == 'msgspec':
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    DecodeError = msgspec.DecodeError
elif backend == 'orjson':
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError
else:
    dumps = json_dumps
    loads = json.loads
    DecodeError = json.JSONDecodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
