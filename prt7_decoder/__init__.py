"""
PRT-7 Decoder - rotating substitution frame decoder

Decodes messages sent as LOAD/MAP text frames over a serial link. LOAD frames
carry one cipher-shifted character, MAP frames rotate the cipher wheel that
decodes every following character.
"""

__version__ = "0.1.0"
__author__ = "PRT-7 Team"
