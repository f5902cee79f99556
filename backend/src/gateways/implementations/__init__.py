"""Gateway adapter implementations"""
