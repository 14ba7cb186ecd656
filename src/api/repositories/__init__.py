# This file marks the repositories package for task persistence modules.
# Repository modules own SQL text and translate database outcomes into domain errors.
