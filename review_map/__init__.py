"""
Honest-review store map service.

A directory of stores reviewed in a YouTube series: filterable listing, map
markers and detail panels over a hosted Supabase database, plus an admin
surface for data entry.
"""
