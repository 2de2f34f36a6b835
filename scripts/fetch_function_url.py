import os
import sys

import boto3

DEFAULT_STACK_NAME = "RustyLambdaStack"
OUTPUT_KEY = "helloWorldApiFnUrl"


def find_output(outputs, key=OUTPUT_KEY):
    # CDK generates unique IDs in output keys when nested, so we check for substring
    for o in outputs:
        if key in o["OutputKey"]:
            return o["OutputValue"]
    return None


def fetch_function_url(stack_name, cfn=None):
    """Return the deployed Function URL of ``stack_name``.

    ClientError from CloudFormation (e.g. the stack does not exist) is not caught here.
    """
    cfn = cfn or boto3.client("cloudformation")
    response = cfn.describe_stacks(StackName=stack_name)

    outputs = response["Stacks"][0].get("Outputs", [])
    url = find_output(outputs)
    if url is None:
        raise LookupError(f"Stack {stack_name} has no {OUTPUT_KEY} output. Is it deployed?")
    return url


def main():
    stack_name = os.environ.get("STACK_NAME", DEFAULT_STACK_NAME)

    print(f"Fetching outputs for stack: {stack_name}...", file=sys.stderr)
    try:
        url = fetch_function_url(stack_name)
    except Exception as e:
        print(f"Error fetching Function URL for {stack_name}: {e}", file=sys.stderr)
        print("Please ensure the stack is deployed and the name is correct.", file=sys.stderr)
        return 1

    print(url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
