"""Exceptions raised by the easyhtml package.

Türkçe: easyhtml paketinin yükselttiği istisnalar.
"""

from __future__ import annotations

from typing import Any


class EasyHTMLError(Exception):
    """Base class for every error raised by easyhtml.

    Türkçe: easyhtml hatalarının ortak temel sınıfı.
    """


class ParseError(EasyHTMLError, ValueError):
    """The HTML parser rejected the input markup.

    Türkçe: HTML ayrıştırıcısı girdiyi reddetti.
    """


class SelectorError(EasyHTMLError, ValueError):
    """A CSS selector could not be compiled.

    Türkçe: CSS seçicisi derlenemedi.
    """

    def __init__(self, selector: str, message: str) -> None:
        """Record the offending ``selector`` with the engine's ``message``.

        Türkçe: Hatalı seçiciyi ve motorun mesajını saklar.
        """
        super().__init__(f"invalid selector {selector!r}: {message}")
        self.selector = selector


class SelectorNotFound(EasyHTMLError, KeyError):
    """Raised by ``Document[selector]`` when nothing matches.

    Türkçe: ``Document[seçici]`` hiçbir düğümle eşleşmediğinde yükseltilir.
    """

    def __init__(self, selector: str) -> None:
        """Record the ``selector`` that matched nothing.

        Türkçe: Eşleşme bulamayan seçiciyi saklar.
        """
        super().__init__(selector)
        self.selector = selector

    def __str__(self) -> str:
        """Describe the miss instead of echoing the key like ``KeyError`` does.

        Türkçe: Eşleşmeme durumunu açıklayan bir mesaj döndürür.
        """
        return f"no nodes match selector {self.selector!r}"


class UnsupportedNodeShape(EasyHTMLError, TypeError):
    """A node tree contains something other than an element, comment or text.

    Türkçe: Düğüm ağacında öğe, yorum veya metin dışında bir şey var.
    """

    def __init__(self, node: Any) -> None:
        """Keep the offending object as ``node``.

        Türkçe: Sorunlu nesneyi ``node`` olarak saklar.
        """
        super().__init__(f"unsupported node shape: {node!r}")
        self.node = node
