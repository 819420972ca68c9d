#!/usr/bin/env python3

import aws_cdk as cdk

from flight_management_stack import FlightManagementStack

app = cdk.App()
FlightManagementStack(
    app,
    "FlightManagementStack",
)

app.synth()
