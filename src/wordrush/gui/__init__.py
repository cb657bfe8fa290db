"""
Word Rush GUI - Kivy front end for the typing trainer

Install dependencies:
    pip install .[gui]

Run:
    wordrush-gui
"""

from .app import WordRushApp

__all__ = ['WordRushApp']
