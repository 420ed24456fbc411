"""
BigIntegerState — Immutable снапшот BigInteger

Pydantic модель внутреннего состояния (цифры + знак) с проверкой
инварианта хранения. Используется для проверяемого конструирования из
внешних данных и для инспекции значения без доступа к приватным полям.

ИНВАРИАНТ:
- sign == NAN     <=> digits пустой
- sign == ZERO    <=> digits == (0,)
- иначе digits непустой и без старшего нуля
"""

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from .sign import Sign


class BigIntegerState(BaseModel):
    """
    Снапшот BigInteger.

    digits хранятся least-significant first, каждая цифра 0-9.
    """

    digits: tuple[Annotated[int, Field(ge=0, le=9)], ...] = Field(
        ..., description="Цифры модуля (least-significant first)"
    )
    sign: Sign = Field(..., description="Знак: NAN / NEGATIVE / ZERO / POSITIVE")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_storage_invariant(self) -> "BigIntegerState":
        """Проверка согласованности знака и цифр"""
        if self.sign is Sign.NAN:
            if self.digits:
                raise ValueError("NaN state must not carry digits")
            return self

        if self.sign is Sign.ZERO:
            if self.digits != (0,):
                raise ValueError("ZERO state must have digits == (0,)")
            return self

        if not self.digits:
            raise ValueError(f"{self.sign.name} state requires at least one digit")
        if self.digits[-1] == 0:
            raise ValueError("digits must not have a most-significant zero")

        return self
