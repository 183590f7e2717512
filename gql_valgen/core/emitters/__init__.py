"""Validation library emitters."""

from ..config import TargetSchema
from .base import SchemaEmitter
from .myzod import MyZodEmitter
from .yup import YupEmitter
from .zod import ZodEmitter

EMITTERS: dict[TargetSchema, type[SchemaEmitter]] = {
    TargetSchema.YUP: YupEmitter,
    TargetSchema.ZOD: ZodEmitter,
    TargetSchema.MYZOD: MyZodEmitter,
}

__all__ = [
    "EMITTERS",
    "MyZodEmitter",
    "SchemaEmitter",
    "YupEmitter",
    "ZodEmitter",
]
