#!/usr/bin/env python3

import aws_cdk as cdk

from courtside_stack import CourtsideStack

app = cdk.App()
CourtsideStack(
    app,
    "CourtsideStack",
)

app.synth()
