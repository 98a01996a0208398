"""
The MODEL layer contains pure data structures for the radar.
It has NO knowledge of rendering. It deals with Configuration and Entries.
"""
