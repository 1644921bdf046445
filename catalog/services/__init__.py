"""Business logic services.

Services sit between the storage repositories and observers (UI):
- seed: one-time population of the default taxonomy
- catalog: the product catalog controller and its search filter
- state: observable value holders the controller publishes through
"""
