"""
Unified DynamoDB utilities for Eterna.

This module centralizes ALL DynamoDB interactions:
- Scanning tables
- Loading items by key
- Saving items (optionally conditional)
- Partial updates with SET expressions and optional conditions
- Atomic counter increments
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from botocore.exceptions import ClientError
from eterna.aws.clients import get_ddb_table
from eterna.logutil import clogger

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


def is_conditional_check_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == CONDITIONAL_CHECK_FAILED


# =============================================================================
# Expression Builders
# =============================================================================
def build_set_expression(
    fields: Dict[str, Any], prefix: str = "f"
) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
    """
    Build "SET #f0 = :f0, #f1 = :f1" with placeholder maps.

    Placeholders keep reserved words (e.g. "name") and non-ASCII keys safe.
    """
    if not fields:
        raise ValueError("At least one field is required for an update")

    clauses: List[str] = []
    names: Dict[str, str] = {}
    values: Dict[str, Any] = {}
    for i, (field_name, value) in enumerate(fields.items()):
        names[f"#{prefix}{i}"] = field_name
        values[f":{prefix}{i}"] = value
        clauses.append(f"#{prefix}{i} = :{prefix}{i}")

    return "SET " + ", ".join(clauses), names, values


# =============================================================================
# Generic DynamoDB Table Utilities
# =============================================================================
def scan_table(table_name: str) -> List[Dict[str, Any]]:
    """
    Scan an entire DynamoDB table and return all items.
    Handles automatic pagination.
    """
    table = get_ddb_table(table_name)

    results: List[Dict[str, Any]] = []
    response = table.scan()
    results.extend(response.get("Items", []))

    while "LastEvaluatedKey" in response:
        response = table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
        results.extend(response.get("Items", []))

    clogger.debug(f"[DDB] Scanned {len(results)} items from {table_name}")
    return results


def load_item_from_key(
    table_name: str, key: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """
    Load a generic item from a DynamoDB table by its key.
    Reads are strongly consistent so every decision sees fresh state.
    """
    table = get_ddb_table(table_name)
    try:
        response = table.get_item(Key=key, ConsistentRead=True)
        item = response.get("Item")
        if item:
            clogger.debug(f"[DDB] Loaded item from {table_name} with key={key}")
        else:
            clogger.warning(f"[DDB] No item found in {table_name} with key={key}")
        return item
    except ClientError as e:
        clogger.error(
            f"[DDB] Failed to load item from {table_name} with key={key}: {e}"
        )
        raise


def save_item_to_table(
    table_name: str,
    item: Dict[str, Any],
    condition_expression: Optional[str] = None,
) -> None:
    """
    Save a generic item to a DynamoDB table.
    """
    table = get_ddb_table(table_name)
    kwargs: Dict[str, Any] = {"Item": item}
    if condition_expression:
        kwargs["ConditionExpression"] = condition_expression
    try:
        table.put_item(**kwargs)
        clogger.info(f"[DDB] Saved item to {table_name}")
    except ClientError as e:
        clogger.error(f"[DDB] Failed to save item to {table_name}: {e}")
        raise


def update_item_fields(
    table_name: str,
    key: Dict[str, Any],
    fields: Dict[str, Any],
    condition_expression: Optional[str] = None,
    condition_names: Optional[Dict[str, str]] = None,
    condition_values: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Overwrite the given top-level fields of one item in a single UpdateItem.

    Returns:
        The full item after the update (ReturnValues=ALL_NEW)

    Raises:
        ClientError: including ConditionalCheckFailedException when the
            condition does not hold (nothing is written in that case)
    """
    table = get_ddb_table(table_name)
    expression, names, values = build_set_expression(fields)
    names.update(condition_names or {})
    values.update(condition_values or {})

    kwargs: Dict[str, Any] = {
        "Key": key,
        "UpdateExpression": expression,
        "ExpressionAttributeNames": names,
        "ExpressionAttributeValues": values,
        "ReturnValues": "ALL_NEW",
    }
    if condition_expression:
        kwargs["ConditionExpression"] = condition_expression

    try:
        response = table.update_item(**kwargs)
    except ClientError as e:
        level = clogger.debug if is_conditional_check_failure(e) else clogger.error
        level(f"[DDB] Update of {key} in {table_name} rejected: {e}")
        raise

    clogger.debug(f"[DDB] Updated {sorted(fields)} of {key} in {table_name}")
    return response.get("Attributes", {})


def increment_item_counter(
    table_name: str,
    key: Dict[str, Any],
    path: Sequence[str],
    amount: int = 1,
) -> Dict[str, Any]:
    """
    Atomically add `amount` to a (possibly nested) numeric attribute.

    The item must already exist; a missing counter starts from 0.

    Args:
        path: attribute path, e.g. ["support_count"] or ["reactions", "🎉"]
    """
    table = get_ddb_table(table_name)
    names = {f"#p{i}": part for i, part in enumerate(path)}
    target = ".".join(names)
    key_name = next(iter(key))
    names["#key"] = key_name

    try:
        response = table.update_item(
            Key=key,
            UpdateExpression=f"SET {target} = if_not_exists({target}, :zero) + :amount",
            ConditionExpression="attribute_exists(#key)",
            ExpressionAttributeNames=names,
            ExpressionAttributeValues={":zero": 0, ":amount": amount},
            ReturnValues="ALL_NEW",
        )
    except ClientError as e:
        level = clogger.debug if is_conditional_check_failure(e) else clogger.error
        level(f"[DDB] Increment of {list(path)} on {key} in {table_name} rejected: {e}")
        raise

    return response.get("Attributes", {})
