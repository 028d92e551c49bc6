"""Template Annotator - Exposes the generated REST API id as a stack output."""
from waf_associator.application.resource_resolver import REST_API_ID_OUTPUT_KEY, REST_API_LOGICAL_ID


def rest_api_id_output() -> dict:
    """Output declaration referencing the generated REST API resource."""
    return {
        "Description": "Rest API Id",
        "Value": {"Ref": REST_API_LOGICAL_ID},
    }


def annotate_template(template: dict) -> dict:
    """
    Add the REST API id output to a compiled CloudFormation template.

    The output survives into the deployed stack even when the REST API
    resource is moved to a nested stack, which lets ResourceResolver fall
    back to it. Re-running overwrites the same key.

    Args:
        template: Compiled template, mutated in place

    Returns:
        The same template
    """
    outputs = template.get("Outputs")
    if outputs is None:
        outputs = template["Outputs"] = {}
    outputs[REST_API_ID_OUTPUT_KEY] = rest_api_id_output()
    return template
