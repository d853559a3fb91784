"""GeneralizedTime处理 (RFC 5280 §4.1.2.5.2)"""

import datetime

from pyasn1.type import useful

_ONE_MILLISECOND = 1000  # 微秒


def to_utc(dt: datetime.datetime) -> datetime.datetime:
    """naive时间按UTC处理，aware时间转换为UTC"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def normalize_generalized_time(dt: datetime.datetime) -> datetime.datetime:
    """
    将亚秒部分归零

    亚秒部分不小于1毫秒时保留为正好1毫秒（闰秒标记），否则为0。
    """
    dt = to_utc(dt)
    micros = _ONE_MILLISECOND if dt.microsecond >= _ONE_MILLISECOND else 0
    return dt.replace(microsecond=micros)


def format_generalized_time(dt: datetime.datetime) -> str:
    """格式化为 YYYYMMDDHHMMSSZ，不输出小数秒"""
    dt = normalize_generalized_time(dt)
    return "%04d%02d%02d%02d%02d%02dZ" % (
        dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second
    )


def to_generalized_time(dt: datetime.datetime) -> useful.GeneralizedTime:
    return useful.GeneralizedTime(format_generalized_time(dt))
