import logging

import pytest
import sioframe

from sioframe import Kind, Message


def test_encode_emit():
    msg = Message(Kind.EMIT, method='foo', args='[1,2]')
    assert sioframe.encode(msg) == '42["foo",[1,2]]'

    msg = Message(Kind.EMIT, '/chat', method='foo', args='1,"two"')
    assert sioframe.encode(msg) == '42/chat,["foo",1,"two"]'


def test_encode_method_is_quoted():
    msg = Message(Kind.EMIT, method='say "hi"', args='1')
    assert sioframe.encode(msg) == '42["say \\"hi\\"",1]'


def test_encode_ack():
    msg = Message(Kind.ACK_REQUEST, ack_id=12, method='foo', args='{}')
    assert sioframe.encode(msg) == '4212["foo",{}]'

    msg = Message(Kind.ACK_REQUEST, '/chat', 12, 'foo', '{}')
    assert sioframe.encode(msg) == '42/chat,12["foo",{}]'

    msg = Message(Kind.ACK_RESPONSE, ack_id=1, args='"bar"')
    assert sioframe.encode(msg) == '431["bar"]'

    msg = Message(Kind.ACK_RESPONSE, '/chat', 0, args='')
    assert sioframe.encode(msg) == '43/chat,0[]'


def test_encode_lifecycle():
    assert sioframe.encode(Message(Kind.OPEN, args='{"sid":"x"}')) == '0{"sid":"x"}'
    assert sioframe.encode(Message(Kind.OPEN, '/chat', args='{}')) == '0/chat,{}'
    assert sioframe.encode(Message(Kind.CLOSE)) == '1'
    assert sioframe.encode(Message(Kind.PING)) == '2'
    assert sioframe.encode(Message(Kind.PONG, '/chat')) == '3/chat'
    assert sioframe.encode(Message(Kind.EMPTY, '/chat')) == '40/chat'


def test_encode_ignores_irrelevant_fields():
    msg = Message(Kind.PING, ack_id=5, method='foo', args='[1]')
    assert sioframe.encode(msg) == '2'

    msg = Message(Kind.EMIT, ack_id=5, method='foo', args='1')
    assert sioframe.encode(msg) == '42["foo",1]'


def test_encode_wrong_type():

    for bogus in ('emit', 42, None):
        with pytest.raises(sioframe.WrongMessageType):
            sioframe.encode(Message(bogus, method='foo', args='1'))


def test_encode_missing_ack_id():

    for kind in (Kind.ACK_REQUEST, Kind.ACK_RESPONSE):
        for ack_id in (None, -1, True, False, 1.5, '3'):
            with pytest.raises(sioframe.WrongPacket):
                sioframe.encode(Message(kind, ack_id=ack_id, method='foo', args='1'))


@pytest.mark.parametrize('backend', ['msgspec', 'orjson', 'json'])
def test_encode_unquotable_method(reload_json, backend):

    # A lone surrogate cannot be written as UTF-8 JSON by any backend.

    reload_json(backend)
    msg = Message(Kind.EMIT, method='\ud800', args='1')

    with pytest.raises(sioframe.WrongPacket):
        sioframe.encode(msg)

    with pytest.raises(RuntimeError) as caught:
        sioframe.must_encode(msg)

    assert isinstance(caught.value.__cause__, sioframe.WrongPacket)


def test_must_encode(caplog):
    msg = Message(Kind.EMIT, method='foo', args='[1,2]')
    assert sioframe.must_encode(msg) == sioframe.encode(msg)

    with caplog.at_level(logging.ERROR, logger='sioframe.protocol.wire'):
        with pytest.raises(RuntimeError) as caught:
            sioframe.must_encode(Message('bogus'))

    assert isinstance(caught.value.__cause__, sioframe.WrongMessageType)
    assert 'cannot encode' in caplog.text


def test_decode_lifecycle():

    msg = sioframe.decode('2')
    assert msg.kind is Kind.PING
    assert msg.namespace == ''
    assert msg.source == '2'

    msg = sioframe.decode('0/chat,{}')
    assert msg.kind is Kind.OPEN
    assert msg.namespace == '/chat'
    assert msg.args == '{}'

    msg = sioframe.decode('0')
    assert msg.kind is Kind.OPEN
    assert msg.args == ''

    assert sioframe.decode('1/chat') == Message(Kind.CLOSE, '/chat')
    assert sioframe.decode('3') == Message(Kind.PONG)
    assert sioframe.decode('40/chat,') == Message(Kind.EMPTY, '/chat')


def test_decode_emit():

    msg = sioframe.decode('42["foo",[1,2]]')
    assert msg.kind is Kind.EMIT
    assert msg.namespace == ''
    assert msg.ack_id is None
    assert msg.method == 'foo'
    assert msg.args == '[1,2]'

    msg = sioframe.decode('42/chat,["foo",1,"two"]')
    assert msg == Message(Kind.EMIT, '/chat', method='foo', args='1,"two"')


def test_decode_ack():

    msg = sioframe.decode('421["foo",{"a":1}]')
    assert msg == Message(Kind.ACK_REQUEST, '', 1, 'foo', '{"a":1}')

    msg = sioframe.decode('42/chat,7["foo",1]')
    assert msg == Message(Kind.ACK_REQUEST, '/chat', 7, 'foo', '1')

    msg = sioframe.decode('431["bar"]')
    assert msg.kind is Kind.ACK_RESPONSE
    assert msg.ack_id == 1
    assert msg.args == '"bar"'
    assert msg.method == ''

    msg = sioframe.decode('43/chat,0[]')
    assert msg == Message(Kind.ACK_RESPONSE, '/chat', 0, args='')


def test_decode_wrong_type():

    for frame in ('', '4', '41', '5', 'hello'):
        with pytest.raises(sioframe.WrongMessageType):
            sioframe.decode(frame)


def test_decode_wrong_packet():

    for frame in ('421[', '431', '431[', '43', '42', '42["foo"]', '42["foo"x"bar",1]'):
        with pytest.raises(sioframe.WrongPacket):
            sioframe.decode(frame)


def test_decode_ack_response_needs_ack_id():

    with pytest.raises(ValueError) as caught:
        sioframe.decode('43["bar"]')

    assert not isinstance(caught.value, sioframe.ProtocolError)


def test_decode_emit_fallback_keeps_namespace_in_body():
    """ An emit without an ack id has its body re-read from the original
        frame, namespace included. A quote inside the namespace therefore
        breaks the method parsing, while the same frame with an ack id
        decodes cleanly.
    """

    msg = sioframe.decode('42/a"b,1["foo",1]')
    assert msg == Message(Kind.ACK_REQUEST, '/a"b', 1, 'foo', '1')

    with pytest.raises(sioframe.WrongPacket):
        sioframe.decode('42/a"b,["foo",1]')


def test_decode_logs_failures(caplog):

    with caplog.at_level(logging.DEBUG, logger='sioframe.protocol.wire'):
        with pytest.raises(sioframe.WrongPacket):
            sioframe.decode('421[')

    assert 'malformed frame' in caplog.text


def test_round_trip():

    messages = (
        Message(Kind.OPEN, args='{"sid":"abc","pingInterval":25000}'),
        Message(Kind.OPEN, '/chat', args='{}'),
        Message(Kind.CLOSE),
        Message(Kind.PING, '/chat'),
        Message(Kind.PONG),
        Message(Kind.EMPTY, '/admin'),
        Message(Kind.EMIT, method='message', args='"hello"'),
        Message(Kind.EMIT, '/chat', method='join', args='{"room":1},[2,3]'),
        Message(Kind.ACK_REQUEST, '', 0, 'get', '[]'),
        Message(Kind.ACK_REQUEST, '/chat', 99, 'get', 'null'),
        Message(Kind.ACK_RESPONSE, '', 99, args='true,{"a":[1]}'),
        Message(Kind.ACK_RESPONSE, '/chat', 3, args=''),
    )

    for msg in messages:
        frame = sioframe.encode(msg)
        decoded = sioframe.decode(frame)
        assert decoded == msg
        assert decoded.source == frame


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
