"""
Core building blocks: numeric classification, floored division,
character transliteration and superscript/subscript formatting.

Все модули независимы от внешних систем и не хранят изменяемого состояния.
"""
