"""
Task subsystem.

Components:
- task_models.py: Task record and date/time input parsing
- task_ordering.py: chronological order, undated tasks last
- task_codec.py: "<timestamp>;<text>" line format
- task_store.py: flat-file storage on top of the codec
"""
