"""HoopEntry package.

Check-in ledger for a basketball event, organized by feature modules
(tickets, entries, reports) with a thin Flask controller layer over
service/repository layers.
"""
