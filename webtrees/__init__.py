"""
webtrees - online genealogy
"""
