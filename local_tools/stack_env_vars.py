# stack_env_vars.py
from __future__ import annotations
import json
import logging
from typing import Dict, Optional

from local_tools.default_config import LAMBDA_FUNCTION_TYPE, NESTED_STACK_TYPE

logger = logging.getLogger(__name__)


class CollectionResult:
    def __init__(self):
        self.merged: Dict[str, str] = {}
        self.stacks: Dict[str, Dict[str, Dict[str, str]]] = {}
        self.function_count: int = 0


def nested_stack_name(physical_resource_id: str) -> str:
    """
    Child stack name from a nested stack's physical ID.

    arn:aws:cloudformation:us-east-1:123456789012:stack/Parent-Child-ABC/guid -> Parent-Child-ABC
    """
    parts = physical_resource_id.split("/")
    if len(parts) < 2:
        raise ValueError(f"Unexpected nested stack id: {physical_resource_id}")
    return parts[1]


class StackEnvCollector:
    """
    Walk a CloudFormation stack depth-first and collect Lambda environment variables.

    Nested stacks are visited in place, so a child finishes before its parent's summary
    is logged. Variables are merged last-write-wins in listing order.
    """

    def __init__(self, cloudformation_client, lambda_client):
        self._cfn = cloudformation_client
        self._lambda = lambda_client

    def _list_stack_resources(self, stack_name: str):
        paginator = self._cfn.get_paginator("list_stack_resources")
        for page in paginator.paginate(StackName=stack_name):
            for resource in page.get("StackResourceSummaries", []):
                yield resource

    def _walk(self, stack_name: str, result: CollectionResult, nested: bool = True) -> None:
        page: Dict[str, Dict[str, str]] = {}

        for resource in self._list_stack_resources(stack_name):
            resource_type = resource.get("ResourceType")

            if resource_type == NESTED_STACK_TYPE and nested:
                self._walk(nested_stack_name(resource["PhysicalResourceId"]), result)

            if resource_type == LAMBDA_FUNCTION_TYPE:
                result.function_count += 1
                config = self._lambda.get_function_configuration(FunctionName=resource["PhysicalResourceId"])
                variables = (config.get("Environment") or {}).get("Variables")
                if variables:
                    page[resource["LogicalResourceId"]] = variables
                    result.merged.update(variables)

        logger.info(f"completed stack: {stack_name}")
        logger.info(f"functionCount: {result.function_count}")

        if page:
            result.stacks[stack_name] = page

    def collect(self, stack_name: str, nested: bool = True) -> CollectionResult:
        result = CollectionResult()
        self._walk(stack_name, result, nested=nested)
        return result


def write_parameters_file(path: str, merged: Dict[str, str]) -> None:
    """Write {"Parameters": merged} as 2-space indented UTF-8 JSON, replacing any existing file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"Parameters": merged}, f, indent=2, ensure_ascii=False)


def format_variables(merged: Dict[str, str]) -> str:
    return json.dumps(merged, indent=2, ensure_ascii=False)


def export_stack_variables(collector: StackEnvCollector, stack_name: str,
                           output: Optional[str] = None) -> CollectionResult:
    result = collector.collect(stack_name)
    print(format_variables(result.merged))

    if output:
        write_parameters_file(output, result.merged)
        logger.info("Write successful")
    return result
