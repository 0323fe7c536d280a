# statesem/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Hashable

AssemblyID = str
SubmachineID = str
TransitionID = str
EventID = str

# Payload of a Predicate guard; the assembly decides what it means.
PredicateValue = Hashable
