"""
MEXC protobuf push frame codec.

MEXC V3 public streams push binary Protocol Buffers frames wrapped in
PushDataV3ApiWrapper. The schema below is registered in a private descriptor
pool at import time and compiled into a message class once; decoding then maps
the protobuf message onto the PushDataEnvelope pydantic model.

Oneof members the adapter does not model are still declared (as empty
messages) so they decode to OtherBody with their wire name. Field numbers the
schema does not know at all are kept as unknown fields and yield no body.
"""

from __future__ import annotations

from typing import Any

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import DecodeError, Message
from pydantic import ValidationError

from marketfeed.adapters.mexc.data import (
    OtherBody,
    PublicAggreBookTicker,
    PublicAggreDealItem,
    PublicAggreDeals,
    PublicDealItem,
    PublicDeals,
    PublicSpotKline,
    PushDataBody,
    PushDataEnvelope,
)
from marketfeed.errors import CodecError

_PACKAGE = "mexc"
_FieldProto = descriptor_pb2.FieldDescriptorProto

_STRING = _FieldProto.TYPE_STRING
_BYTES = _FieldProto.TYPE_BYTES
_INT32 = _FieldProto.TYPE_INT32
_INT64 = _FieldProto.TYPE_INT64
_MESSAGE = _FieldProto.TYPE_MESSAGE

# Deal strings are read as bytes so one undecodable item cannot fail its batch
_DEAL_ITEM_FIELDS = [
    ("price", 1, _BYTES),
    ("quantity", 2, _BYTES),
    ("trade_type", 3, _INT32),
    ("time", 4, _INT64),
]

# name -> [(field name, number, type)]
_MESSAGES: dict[str, list[tuple[str, int, int]]] = {
    "PublicDealsV3ApiItem": _DEAL_ITEM_FIELDS,
    "PublicAggreDealsV3ApiItem": _DEAL_ITEM_FIELDS,
    "PublicAggreBookTickerV3Api": [
        ("bid_price", 1, _STRING),
        ("bid_quantity", 2, _STRING),
        ("ask_price", 3, _STRING),
        ("ask_quantity", 4, _STRING),
    ],
    "PublicSpotKlineV3Api": [
        ("interval", 1, _STRING),
        ("window_start", 2, _INT64),
        ("opening_price", 3, _STRING),
        ("closing_price", 4, _STRING),
        ("highest_price", 5, _STRING),
        ("lowest_price", 6, _STRING),
        ("volume", 7, _STRING),
        ("amount", 8, _STRING),
        ("window_end", 9, _INT64),
    ],
    "Unmodelled": [],
}

# body oneof: field name -> (number, message type)
_BODY_FIELDS: dict[str, tuple[int, str]] = {
    "public_deals": (301, "PublicDealsV3Api"),
    "public_increase_depths": (302, "Unmodelled"),
    "public_limit_depths": (303, "Unmodelled"),
    "private_orders": (304, "Unmodelled"),
    "public_book_ticker": (305, "Unmodelled"),
    "private_deals": (306, "Unmodelled"),
    "private_account": (307, "Unmodelled"),
    "public_spot_kline": (308, "PublicSpotKlineV3Api"),
    "public_mini_ticker": (309, "Unmodelled"),
    "public_mini_tickers": (310, "Unmodelled"),
    "public_book_ticker_batch": (311, "Unmodelled"),
    "public_increase_depths_batch": (312, "Unmodelled"),
    "public_aggre_depths": (313, "Unmodelled"),
    "public_aggre_deals": (314, "PublicAggreDealsV3Api"),
    "public_aggre_book_ticker": (315, "PublicAggreBookTickerV3Api"),
}


def _add_message(
    file_proto: descriptor_pb2.FileDescriptorProto,
    name: str,
    fields: list[tuple[str, int, int]],
) -> descriptor_pb2.DescriptorProto:
    message = file_proto.message_type.add(name=name)
    for field_name, number, field_type in fields:
        message.field.add(
            name=field_name,
            number=number,
            type=field_type,
            label=_FieldProto.LABEL_OPTIONAL,
        )
    return message


def _add_batch_message(
    file_proto: descriptor_pb2.FileDescriptorProto, name: str, item_type: str
) -> None:
    message = _add_message(file_proto, name, [("event_type", 2, _STRING)])
    message.field.add(
        name="deals",
        number=1,
        type=_MESSAGE,
        type_name=f".{_PACKAGE}.{item_type}",
        label=_FieldProto.LABEL_REPEATED,
    )


def _build_file_proto() -> descriptor_pb2.FileDescriptorProto:
    # proto2 gives explicit presence on the optional wrapper fields
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="mexc/push_data_v3_api_wrapper.proto",
        package=_PACKAGE,
        syntax="proto2",
    )
    for name, fields in _MESSAGES.items():
        _add_message(file_proto, name, fields)
    _add_batch_message(file_proto, "PublicDealsV3Api", "PublicDealsV3ApiItem")
    _add_batch_message(
        file_proto, "PublicAggreDealsV3Api", "PublicAggreDealsV3ApiItem"
    )

    wrapper = _add_message(
        file_proto,
        "PushDataV3ApiWrapper",
        [
            ("channel", 1, _STRING),
            ("symbol", 3, _STRING),
            ("symbol_id", 4, _STRING),
            ("create_time", 5, _INT64),
            ("send_time", 6, _INT64),
        ],
    )
    wrapper.oneof_decl.add(name="body")
    for field_name, (number, type_name) in _BODY_FIELDS.items():
        wrapper.field.add(
            name=field_name,
            number=number,
            type=_MESSAGE,
            type_name=f".{_PACKAGE}.{type_name}",
            label=_FieldProto.LABEL_OPTIONAL,
            oneof_index=0,
        )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file_proto().SerializeToString())

# Compiled message class for PushDataV3ApiWrapper
PushDataMessage: type[Message] = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{_PACKAGE}.PushDataV3ApiWrapper")
)


def _optional(message: Message, field_name: str) -> Any:
    return getattr(message, field_name) if message.HasField(field_name) else None


def _deal_text(raw: bytes) -> str:
    # undecodable bytes become U+FFFD and fail decimal parsing for this item only
    return raw.decode("utf-8", errors="replace")


def _deal_fields(item: Any) -> dict[str, Any]:
    return {
        "price": _deal_text(item.price),
        "quantity": _deal_text(item.quantity),
        "trade_type": item.trade_type,
        "time": item.time,
    }


def _body_from_message(message: Any) -> PushDataBody | None:
    tag = message.WhichOneof("body")
    match tag:
        case None:
            return None
        case "public_deals":
            return PublicDeals(
                deals=[
                    PublicDealItem(**_deal_fields(d))
                    for d in message.public_deals.deals
                ],
                event_type=message.public_deals.event_type,
            )
        case "public_aggre_deals":
            return PublicAggreDeals(
                deals=[
                    PublicAggreDealItem(**_deal_fields(d))
                    for d in message.public_aggre_deals.deals
                ],
                event_type=message.public_aggre_deals.event_type,
            )
        case "public_aggre_book_ticker":
            ticker = message.public_aggre_book_ticker
            return PublicAggreBookTicker(
                bid_price=ticker.bid_price,
                bid_quantity=ticker.bid_quantity,
                ask_price=ticker.ask_price,
                ask_quantity=ticker.ask_quantity,
            )
        case "public_spot_kline":
            kline = message.public_spot_kline
            return PublicSpotKline(
                interval=kline.interval,
                window_start=kline.window_start,
                opening_price=kline.opening_price,
                closing_price=kline.closing_price,
                highest_price=kline.highest_price,
                lowest_price=kline.lowest_price,
                volume=kline.volume,
                amount=kline.amount,
                window_end=kline.window_end,
            )
        case _:
            return OtherBody(tag=tag)


def decode_push_data(payload: bytes) -> PushDataEnvelope:
    """
    Decode one binary push frame.

    Args:
        payload: Raw bytes received on the data channel

    Returns:
        The decoded envelope

    Raises:
        CodecError: If the bytes are not a valid PushDataV3ApiWrapper

    """
    message: Any = PushDataMessage()
    try:
        message.ParseFromString(payload)
    except (DecodeError, UnicodeDecodeError) as e:
        raise CodecError(e) from e

    try:
        return PushDataEnvelope(
            channel=message.channel,
            symbol=_optional(message, "symbol"),
            symbol_id=_optional(message, "symbol_id"),
            create_time=_optional(message, "create_time"),
            send_time=_optional(message, "send_time"),
            body=_body_from_message(message),
        )
    except ValidationError as e:
        raise CodecError(e) from e
