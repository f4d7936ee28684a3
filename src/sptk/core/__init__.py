"""
Core: скалярная математика, комплексные числа, контракты размерностей и доменные модели.

Модули ядра не зависят от модулей массивов и функций.
"""
