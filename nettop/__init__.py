"""nettop — live per-interface network throughput in the terminal.

Samples cumulative NIC counters each tick, turns the deltas into rates,
ranks interfaces by combined throughput and redraws a table until `q`.
"""

__version__ = "0.1.0"
