"""Describes the cake order domain. Centres around a single `Order`.

There is only ever one order. The store hands back the first row it finds and
every operation is a read followed by a write of one field group. Nothing
guards two writers racing each other; the last one wins.
"""
