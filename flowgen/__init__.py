"""Генератор реестра flow-функций для Go-пакетов."""

__version__ = "0.1.0"
