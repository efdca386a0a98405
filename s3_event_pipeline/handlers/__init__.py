"""Lambda handler modules shipped by bucket components.

Each module is uploaded on its own as ``lambda_function.py``, so it may only
import the standard library and boto3.
"""

import os

HANDLER_DIR = os.path.dirname(__file__)

S3_TO_DYNAMODB = os.path.join(HANDLER_DIR, "s3_to_dynamodb.py")
HELLO_THERE = os.path.join(HANDLER_DIR, "hello_there.py")
