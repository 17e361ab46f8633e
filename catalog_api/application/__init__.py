"""
Application layer.

Команды, запросы, валидация и pipeline медиатора.
"""
