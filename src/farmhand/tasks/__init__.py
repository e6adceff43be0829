"""
Task reward subsystem.

Components:
- task_models.py: message records (TaskRecord, TaskInfo, replies, ClaimableTask)
- task_api.py: TaskService RPC wrappers
- task_analyzer.py: claimability check over a task-info snapshot
- task_rewards.py: reward summary text
- task_claimer.py: sequential claim dispatcher
- task_system.py: startup check, push handler and lifecycle
"""
