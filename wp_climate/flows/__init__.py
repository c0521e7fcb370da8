"""Module des flux : enchaînements nommés de commandes."""

from wp_climate.flows.base import FlowRepository
from wp_climate.flows.models import Flow, FlowStep
from wp_climate.flows.repository import JsonFlowRepository, read_flow_file
from wp_climate.flows.runner import FlowReport, FlowRunner, StepOutcome

__all__ = [
    "Flow",
    "FlowStep",
    "FlowRepository",
    "JsonFlowRepository",
    "read_flow_file",
    "FlowRunner",
    "FlowReport",
    "StepOutcome",
]
