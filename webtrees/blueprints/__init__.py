"""
Flask blueprints for the web interface
"""
