"""Training planner core for the Likes coaching platform.

Activity analysis (statistics, characteristics, advice), workout notation
decoding and plan batch previews. Pure functions over in-memory data; fetching
and pushing are left to the callers.
"""

__version__ = "0.1.0"
