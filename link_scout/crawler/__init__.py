# link_scout/crawler/__init__.py
"""Конкурентный обход сайта: диспетчер, проверка ссылок и извлечение адресов."""
