# ruff: noqa: E501
"""The 35 software engineering parameters used as matrix axes."""

from typing import Final

from ._models import ParameterCategory, SoftwareParameter

__all__ = ["SOFTWARE_PARAMETERS"]

SOFTWARE_PARAMETERS: Final[tuple[SoftwareParameter, ...]] = (
    SoftwareParameter(
        id=1,
        name="Response Latency",
        category=ParameterCategory.PERFORMANCE,
        description="Time from request to first response byte",
        example_tradeoff="Lower latency often requires more compute or caching infrastructure",
    ),
    SoftwareParameter(
        id=2,
        name="Data Consistency",
        category=ParameterCategory.DATA,
        description="Guarantee that all nodes see the same data at the same time",
        example_tradeoff="Strong consistency reduces availability and increases latency (CAP theorem)",
    ),
    SoftwareParameter(
        id=3,
        name="Throughput",
        category=ParameterCategory.PERFORMANCE,
        description="Number of operations or requests processed per unit time",
        example_tradeoff="Higher throughput may require batching, reducing individual request latency",
    ),
    SoftwareParameter(
        id=4,
        name="Resource Cost",
        category=ParameterCategory.OPERATIONS,
        description="Compute, memory, storage, and network costs",
        example_tradeoff="Reducing cost often means accepting higher latency or lower redundancy",
    ),
    SoftwareParameter(
        id=5,
        name="Query Performance",
        category=ParameterCategory.PERFORMANCE,
        description="Speed and efficiency of database/search queries",
        example_tradeoff="Denormalization speeds reads but slows writes and increases storage",
    ),
    SoftwareParameter(
        id=6,
        name="Data Freshness",
        category=ParameterCategory.DATA,
        description="How up-to-date the data is when served to users",
        example_tradeoff="Real-time data requires event-driven architecture, adding complexity",
    ),
    SoftwareParameter(
        id=7,
        name="Horizontal Scalability",
        category=ParameterCategory.SCALE,
        description="Ability to add more nodes to handle increased load",
        example_tradeoff="Scaling out introduces distributed coordination complexity",
    ),
    SoftwareParameter(
        id=8,
        name="Predictable Costs",
        category=ParameterCategory.OPERATIONS,
        description="Ability to forecast and control infrastructure spending",
        example_tradeoff="Predictable costs may limit ability to handle traffic spikes",
    ),
    SoftwareParameter(
        id=9,
        name="Fault Tolerance",
        category=ParameterCategory.RELIABILITY,
        description="System continues operating despite component failures",
        example_tradeoff="Redundancy increases cost and data synchronization complexity",
    ),
    SoftwareParameter(
        id=10,
        name="Infrastructure Complexity",
        category=ParameterCategory.OPERATIONS,
        description="Number of moving parts in the deployment architecture",
        example_tradeoff="Simpler infra may limit performance tuning and scaling options",
    ),
    SoftwareParameter(
        id=11,
        name="Authentication Strength",
        category=ParameterCategory.SECURITY,
        description="Security level of identity verification",
        example_tradeoff="Stronger auth (MFA, biometrics) increases user friction",
    ),
    SoftwareParameter(
        id=12,
        name="User Friction",
        category=ParameterCategory.PRODUCT,
        description="Number of steps/barriers users face to complete actions",
        example_tradeoff="Reducing friction may weaken security or data quality",
    ),
    SoftwareParameter(
        id=13,
        name="Feature Completeness",
        category=ParameterCategory.PRODUCT,
        description="Breadth of functionality offered to users",
        example_tradeoff="More features increase maintenance burden and UX complexity",
    ),
    SoftwareParameter(
        id=14,
        name="UX Simplicity",
        category=ParameterCategory.PRODUCT,
        description="Ease of understanding and using the interface",
        example_tradeoff="Simplicity may limit power-user capabilities",
    ),
    SoftwareParameter(
        id=15,
        name="Development Velocity",
        category=ParameterCategory.ENGINEERING,
        description="Speed at which new features can be shipped",
        example_tradeoff="Moving fast may accumulate technical debt",
    ),
    SoftwareParameter(
        id=16,
        name="Code Quality / Maintainability",
        category=ParameterCategory.ENGINEERING,
        description="Readability, testability, and long-term health of the codebase",
        example_tradeoff="High quality code takes longer to write initially",
    ),
    SoftwareParameter(
        id=17,
        name="Model Accuracy",
        category=ParameterCategory.AI_ML,
        description="Correctness of ML model predictions",
        example_tradeoff="Higher accuracy often requires more training data and compute",
    ),
    SoftwareParameter(
        id=18,
        name="Inference Latency",
        category=ParameterCategory.AI_ML,
        description="Time to generate a prediction from an ML model",
        example_tradeoff="Faster inference may require model compression, reducing accuracy",
    ),
    SoftwareParameter(
        id=19,
        name="Training Data Volume",
        category=ParameterCategory.AI_ML,
        description="Amount of data available for model training",
        example_tradeoff="More data improves models but raises privacy and storage concerns",
    ),
    SoftwareParameter(
        id=20,
        name="Privacy Preservation",
        category=ParameterCategory.SECURITY,
        description="Degree to which user data is protected from exposure",
        example_tradeoff="Strong privacy limits personalization and analytics capabilities",
    ),
    SoftwareParameter(
        id=21,
        name="API Surface Area",
        category=ParameterCategory.INTEGRATION,
        description="Breadth and depth of public APIs exposed",
        example_tradeoff="Larger API surface increases versioning and compatibility burden",
    ),
    SoftwareParameter(
        id=22,
        name="Maintenance Burden",
        category=ParameterCategory.ENGINEERING,
        description="Ongoing effort required to keep the system running",
        example_tradeoff="Lower maintenance may mean less customization capability",
    ),
    SoftwareParameter(
        id=23,
        name="Offline Capability",
        category=ParameterCategory.RELIABILITY,
        description="System functionality without network connectivity",
        example_tradeoff="Offline support requires sync logic and conflict resolution",
    ),
    SoftwareParameter(
        id=24,
        name="Sync Complexity",
        category=ParameterCategory.DATA,
        description="Difficulty of keeping data consistent across clients/nodes",
        example_tradeoff="Simpler sync may sacrifice real-time accuracy",
    ),
    SoftwareParameter(
        id=25,
        name="Observability Depth",
        category=ParameterCategory.OPERATIONS,
        description="Ability to understand internal system state from external outputs",
        example_tradeoff="Deep observability adds performance overhead and data storage costs",
    ),
    SoftwareParameter(
        id=26,
        name="Performance Overhead",
        category=ParameterCategory.PERFORMANCE,
        description="Extra resource consumption from non-functional concerns",
        example_tradeoff="Reducing overhead may sacrifice security, logging, or monitoring",
    ),
    SoftwareParameter(
        id=27,
        name="Multi-tenancy Isolation",
        category=ParameterCategory.ARCHITECTURE,
        description="Degree of separation between tenant data and compute",
        example_tradeoff="Strong isolation increases infrastructure cost per tenant",
    ),
    SoftwareParameter(
        id=28,
        name="Customization Flexibility",
        category=ParameterCategory.ARCHITECTURE,
        description="Ability for users/tenants to customize behavior",
        example_tradeoff="More customization increases testing matrix and support complexity",
    ),
    SoftwareParameter(
        id=29,
        name="Schema Rigidity",
        category=ParameterCategory.DATA,
        description="Strictness of data schema enforcement",
        example_tradeoff="Rigid schemas prevent data corruption but slow iteration",
    ),
    SoftwareParameter(
        id=30,
        name="Deployment Frequency",
        category=ParameterCategory.ENGINEERING,
        description="How often new versions can be safely released",
        example_tradeoff="Frequent deploys require robust CI/CD and testing infrastructure",
    ),
    # Parameters 31-35 extend coverage to resource and availability trade-offs
    SoftwareParameter(
        id=31,
        name="Memory Usage",
        category=ParameterCategory.PERFORMANCE,
        description="RAM consumption and heap allocation efficiency",
        example_tradeoff="Lower memory usage may require more disk I/O or recomputation",
    ),
    SoftwareParameter(
        id=32,
        name="Storage Footprint",
        category=ParameterCategory.DATA,
        description="Disk/block storage consumption and efficiency",
        example_tradeoff="Reducing storage may require compression, adding CPU overhead",
    ),
    SoftwareParameter(
        id=33,
        name="Security Posture",
        category=ParameterCategory.SECURITY,
        description="Overall security strength across authentication, authorization, and encryption",
        example_tradeoff="Stronger security adds latency, complexity, and user friction",
    ),
    SoftwareParameter(
        id=34,
        name="Real-time Performance",
        category=ParameterCategory.PERFORMANCE,
        description="Ability to process and respond within strict time bounds",
        example_tradeoff="Real-time guarantees require dedicated resources and simpler processing",
    ),
    SoftwareParameter(
        id=35,
        name="Service Availability",
        category=ParameterCategory.RELIABILITY,
        description="Percentage of time the service is operational and reachable",
        example_tradeoff="Higher availability requires redundancy, increasing cost and complexity",
    ),
)
