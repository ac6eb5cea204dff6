"""Normalizers — conversão de respostas upstream em corpo de saída."""

from api.normalizers.response import ResponseKind, classify, normalize

__all__ = ["ResponseKind", "classify", "normalize"]
