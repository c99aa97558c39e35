"""
Core value type, arithmetic primitives, and invariants.

Модули ядра не зависят от внешних систем и не выполняют I/O.
"""
