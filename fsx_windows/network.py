from aws_cdk import aws_ec2 as ec2

# FSx for Windows listens on 988 and 1021-1023; the range covers all of them
DEFAULT_PORT_RANGE = (988, 1023)


def default_port() -> ec2.Port:
    start_port, end_port = DEFAULT_PORT_RANGE
    return ec2.Port.tcp_range(start_port, end_port)


def configure_connections(security_group: ec2.ISecurityGroup) -> ec2.Connections:
    """Connections object carrying every port the file system needs"""
    return ec2.Connections(security_groups=[security_group], default_port=default_port())


def allow_self_ingress(security_group: ec2.ISecurityGroup) -> None:
    """Let members of the security group reach the file system ports"""
    security_group.add_ingress_rule(
        security_group, default_port(), "FSx for Windows file server traffic"
    )
