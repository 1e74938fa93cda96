# ruff: noqa: E501
"""The 40 classical inventive principles, reinterpreted for software."""

from typing import Final

from ._models import SoftwarePrinciple

__all__ = ["SOFTWARE_PRINCIPLES"]

SOFTWARE_PRINCIPLES: Final[tuple[SoftwarePrinciple, ...]] = (
    SoftwarePrinciple(
        id=1,
        name="Segmentation / Microservices",
        description="Break a monolith into independently deployable units. Isolate concerns so each can evolve, scale, and fail independently.",
        software_examples=(
            "Decompose monolith into microservices with independent databases",
            "Split a large ML pipeline into feature engineering, training, and serving stages",
            "Partition a message queue by topic for independent scaling",
        ),
    ),
    SoftwarePrinciple(
        id=2,
        name="Extraction / Separation",
        description="Move a concern to its own layer, service, or module. Extract what is useful or what is harmful into a separate entity.",
        software_examples=(
            "Extract authentication into a dedicated identity service",
            "Separate read models from write models in event-sourced systems",
            "Move business rules into a rules engine outside the main codebase",
        ),
    ),
    SoftwarePrinciple(
        id=3,
        name="Asymmetry / Read-Write Split",
        description="Separate the read path from the write path (CQRS). Accept write-side delay for read-side speed. Reconcile asynchronously.",
        software_examples=(
            "CQRS pattern with separate read/write stores",
            "Write to primary database, read from materialized views or read replicas",
            "Event sourcing: append-only writes, project to queryable read models",
        ),
    ),
    SoftwarePrinciple(
        id=4,
        name="Prior Action / Pre-computation",
        description="Cache, pre-compute, or warm up results before the request arrives. Trade stale-but-fast reads for eventual consistency.",
        software_examples=(
            "Pre-compute aggregations during off-peak hours (materialized views)",
            "CDN edge caching with TTL-based invalidation",
            "Warm ML model caches before production traffic shift",
        ),
    ),
    SoftwarePrinciple(
        id=5,
        name="Inversion / Edge Push",
        description="Move processing closer to the data source or user. Invert the traditional centralized architecture.",
        software_examples=(
            "Edge computing for IoT data processing (filter before send)",
            "Client-side ML inference (TensorFlow.js, Core ML) instead of server round-trip",
            "Database stored procedures for complex queries instead of application-layer joins",
        ),
    ),
    SoftwarePrinciple(
        id=6,
        name="Intermediary / Proxy",
        description="Insert middleware, sidecar, or gateway between components. The intermediary adds value without changing the endpoints.",
        software_examples=(
            "API gateway for rate limiting, auth, and request transformation",
            "Service mesh sidecar (Envoy) for observability and traffic control",
            "Message broker between producers and consumers for decoupling",
        ),
    ),
    SoftwarePrinciple(
        id=7,
        name="Self-Service / Self-Healing",
        description="System detects and recovers from failure automatically without human intervention.",
        software_examples=(
            "Kubernetes auto-restart on liveness probe failure",
            "Circuit breaker pattern with automatic retry and fallback",
            "Self-healing data pipelines that detect corruption and replay from source",
        ),
    ),
    SoftwarePrinciple(
        id=8,
        name="Dynamism / Adaptive Config",
        description="Replace static configuration with runtime-adaptive behavior. The system adjusts itself based on observed conditions.",
        software_examples=(
            "Dynamic rate limiting based on real-time traffic patterns",
            "Auto-scaling based on queue depth or CPU utilization",
            "Adaptive batch sizes in ML training based on gradient noise",
        ),
    ),
    SoftwarePrinciple(
        id=9,
        name="Partial Action / Graceful Degradation",
        description="Serve partial or approximate results when full results are unavailable. Upgrade to full consistency in the background.",
        software_examples=(
            "Return cached search results when the search service is slow",
            "Show stale dashboard data with a 'last updated' timestamp during outages",
            "Progressive image loading (blur-up then full resolution)",
        ),
    ),
    SoftwarePrinciple(
        id=10,
        name="Feedback Loop / Observability",
        description="Close the loop: measure, alert, auto-adjust. Use output signals to improve input decisions.",
        software_examples=(
            "A/B test results feed back into feature flag decisions",
            "Error rate monitoring triggers automatic rollback",
            "User engagement metrics auto-tune recommendation algorithms",
        ),
    ),
    SoftwarePrinciple(
        id=11,
        name="Discarding / Ephemeral Resources",
        description="Use disposable, short-lived resources instead of persistent ones. Rebuild rather than maintain.",
        software_examples=(
            "Spot instances for batch processing (accept interruption for cost savings)",
            "Ephemeral containers: rebuild on every deploy instead of patching",
            "Serverless functions: no servers to maintain, pay per invocation",
        ),
    ),
    SoftwarePrinciple(
        id=12,
        name="Equipotentiality / Level Playing Field",
        description="Eliminate unnecessary differences between components. Standardize interfaces so any node can handle any request.",
        software_examples=(
            "Stateless services behind a load balancer — any instance handles any request",
            "Homogeneous container images across environments (dev/staging/prod)",
            "Consistent hashing so any node can serve any key range",
        ),
    ),
    SoftwarePrinciple(
        id=13,
        name="Universality / Abstraction",
        description="One mechanism handles multiple use cases. Create a general-purpose tool instead of specialized solutions.",
        software_examples=(
            "GraphQL as a universal query interface over multiple REST APIs",
            "Plugin architecture that handles multiple data formats with one pipeline",
            "Generic workflow engine instead of hard-coded business process logic",
        ),
    ),
    SoftwarePrinciple(
        id=14,
        name="Copying / Replication",
        description="Replicate data or compute across nodes for availability, speed, or fault tolerance.",
        software_examples=(
            "Multi-region database replication for disaster recovery",
            "Read replicas to distribute query load",
            "Model ensembles: multiple models vote on the same prediction",
        ),
    ),
    SoftwarePrinciple(
        id=15,
        name="Nesting / Composition",
        description="Compose smaller primitives into complex behavior. Build systems from composable, reusable building blocks.",
        software_examples=(
            "Middleware chains in Express/Koa for cross-cutting concerns",
            "Terraform modules composing infrastructure from reusable blocks",
            "React component composition for complex UI from simple atoms",
        ),
    ),
    SoftwarePrinciple(
        id=16,
        name="Slightly Less / Partial Action",
        description="If you can't achieve the full effect, achieve slightly less — return partial results, paginate, or lazy-load.",
        software_examples=(
            "Paginated API responses instead of returning all records at once",
            "Lazy loading modules and images to reduce initial page load",
            "Approximate query answers (HyperLogLog for cardinality) when exact counts are too expensive",
        ),
    ),
    SoftwarePrinciple(
        id=17,
        name="Dimensionality Change",
        description="Move from one communication paradigm to another — request-response to streaming, 2D to 3D processing, sync to async.",
        software_examples=(
            "Replace polling with WebSocket or Server-Sent Events for real-time updates",
            "Event-driven architecture with Kafka instead of synchronous REST calls",
            "Stream processing (Flink/Spark Streaming) instead of batch ETL",
        ),
    ),
    SoftwarePrinciple(
        id=18,
        name="Mechanical Vibration / Oscillation",
        description="Use periodic signals — health checks, heartbeats, polling intervals — to detect problems and maintain system awareness.",
        software_examples=(
            "Heartbeat monitoring between distributed nodes",
            "Periodic liveness and readiness probes in Kubernetes",
            "Watchdog timers that reset stuck processes",
        ),
    ),
    SoftwarePrinciple(
        id=19,
        name="Periodic Action",
        description="Replace continuous operations with periodic ones — cron jobs, scheduled batch processing, periodic garbage collection.",
        software_examples=(
            "Scheduled ETL batch jobs during off-peak hours",
            "Periodic cache invalidation sweeps instead of per-write invalidation",
            "Scheduled database vacuum/analyze operations",
        ),
    ),
    SoftwarePrinciple(
        id=20,
        name="Continuity of Useful Action",
        description="Keep useful processes running continuously — connection pooling, warm starts, persistent connections.",
        software_examples=(
            "Database connection pooling to avoid reconnection overhead",
            "Keep-alive HTTP connections for reduced handshake latency",
            "Pre-warmed Lambda/serverless instances to avoid cold starts",
        ),
    ),
    SoftwarePrinciple(
        id=21,
        name="Rushing Through / Fast-Fail",
        description="Perform operations at high speed to avoid harmful effects — fast-fail validation, short-circuit evaluation, circuit breakers.",
        software_examples=(
            "Short-circuit evaluation in validation chains (fail fast on first error)",
            "Circuit breaker pattern that quickly rejects requests to failing services",
            "Quick schema validation before expensive business logic processing",
        ),
    ),
    SoftwarePrinciple(
        id=22,
        name="Convert Harm to Benefit",
        description="Use harmful factors to achieve positive effects — turn errors into monitoring data, retry storms into backpressure signals.",
        software_examples=(
            "Error logs aggregated into alerting dashboards and anomaly detection",
            "Failed request patterns used to identify and mitigate DDoS attacks",
            "Cache misses used to pre-populate future cache entries (cache warming)",
        ),
    ),
    SoftwarePrinciple(
        id=23,
        name="Feedback",
        description="Introduce or improve feedback mechanisms — closed-loop autoscaling, adaptive rate limiting, ML feedback loops.",
        software_examples=(
            "Closed-loop autoscaling based on real-time metrics",
            "Adaptive rate limiting that adjusts based on system load",
            "Reinforcement learning with human feedback (RLHF) for model improvement",
        ),
    ),
    SoftwarePrinciple(
        id=24,
        name="Mediator / Intermediary",
        description="Use an intermediate entity to transfer or carry out an action — message brokers, API gateways, proxy services.",
        software_examples=(
            "Message queue (RabbitMQ, SQS) decoupling producers from consumers",
            "Reverse proxy (nginx) handling TLS termination and load balancing",
            "Data transformation middleware between incompatible systems",
        ),
    ),
    SoftwarePrinciple(
        id=25,
        name="Self-Service",
        description="Make the system serve itself — self-provisioning, auto-remediation, self-documenting APIs.",
        software_examples=(
            "Infrastructure as Code: systems provision themselves from declarative specs",
            "Self-documenting APIs via OpenAPI/Swagger auto-generation",
            "Auto-remediation runbooks triggered by monitoring alerts",
        ),
    ),
    SoftwarePrinciple(
        id=26,
        name="Copying",
        description="Use copies instead of originals — read replicas, CDN edge copies, model ensembles, shadow traffic.",
        software_examples=(
            "Shadow traffic: copy production requests to test new service versions",
            "CDN edge caches serving copies of static assets globally",
            "Database read replicas distributing query load away from the primary",
        ),
    ),
    SoftwarePrinciple(
        id=27,
        name="Cheap Short-Living Objects",
        description="Replace expensive, long-lived resources with cheap, disposable ones — ephemeral containers, spot instances, serverless.",
        software_examples=(
            "Spot/preemptible instances for fault-tolerant batch processing",
            "Ephemeral preview environments spun up per pull request",
            "Serverless functions: zero cost at zero traffic, pay per invocation",
        ),
    ),
    SoftwarePrinciple(
        id=28,
        name="Replace Mechanical System",
        description="Replace a rigid mechanism with a more flexible one — polling with webhooks, monolith with event-driven, manual with automated.",
        software_examples=(
            "Replace polling with webhooks/push notifications",
            "Replace monolithic deploys with event-driven microservices",
            "Replace manual QA with automated test suites and CI/CD pipelines",
        ),
    ),
    SoftwarePrinciple(
        id=29,
        name="Pneumatics / Hydraulics (Lightweight Protocols)",
        description="Use lightweight, efficient protocols instead of heavy ones — gRPC over REST, protobuf over JSON, binary over text.",
        software_examples=(
            "gRPC with Protocol Buffers instead of JSON REST for inter-service communication",
            "MessagePack or CBOR instead of JSON for bandwidth-sensitive mobile apps",
            "Binary WebSocket frames instead of text for real-time data streams",
        ),
    ),
    SoftwarePrinciple(
        id=30,
        name="Flexible Membranes / Boundaries",
        description="Use flexible boundaries that can be adjusted — feature flags, A/B test boundaries, tenant isolation walls, rate limit tiers.",
        software_examples=(
            "Feature flags controlling gradual rollout percentages",
            "A/B test traffic splitting with dynamic allocation",
            "Tenant-specific resource quotas adjustable without redeployment",
        ),
    ),
    SoftwarePrinciple(
        id=31,
        name="Porous Materials / Selective Filtering",
        description="Add selective permeability — cache layers with TTL, bloom filters, leaky bucket rate limiters, data sampling.",
        software_examples=(
            "Bloom filters to quickly reject non-members before expensive lookups",
            "Leaky bucket rate limiters allowing burst while maintaining average rate",
            "Log sampling: store 10% of debug logs, 100% of error logs",
        ),
    ),
    SoftwarePrinciple(
        id=32,
        name="Color Changes / Mode Switching",
        description="Change observable properties without changing substance — dynamic logging levels, debug toggles, observability modes.",
        software_examples=(
            "Dynamic log level changes in production without redeployment",
            "Debug mode toggle that enables verbose tracing for specific requests",
            "Dark launch: feature is deployed but UI is hidden until flag is flipped",
        ),
    ),
    SoftwarePrinciple(
        id=33,
        name="Homogeneity / Standardization",
        description="Standardize on one protocol, format, or approach across services — unified API schemas, consistent error handling.",
        software_examples=(
            "Company-wide API design standards (REST conventions, error format)",
            "Shared protobuf/OpenAPI schemas across all microservices",
            "Standardized logging format (structured JSON) across all services",
        ),
    ),
    SoftwarePrinciple(
        id=34,
        name="Discarding / Recovering",
        description="Discard and recover rather than repair — immutable infrastructure, blue-green deploys, snapshot & rollback.",
        software_examples=(
            "Immutable infrastructure: replace servers instead of patching them",
            "Blue-green deployments: switch traffic, rollback by switching back",
            "Database point-in-time recovery from automated snapshots",
        ),
    ),
    SoftwarePrinciple(
        id=35,
        name="Parameter Changes / Hot Config",
        description="Change system parameters at runtime without restarting — feature flags, hot-reload, dynamic configuration.",
        software_examples=(
            "Runtime configuration changes via config servers (Consul, etcd)",
            "Hot module replacement in development builds",
            "Dynamic feature flag changes affecting behavior without redeployment",
        ),
    ),
    SoftwarePrinciple(
        id=36,
        name="Phase Transition / State Machines",
        description="Use state transitions to manage complex workflows — saga patterns, state machines, workflow engines.",
        software_examples=(
            "Saga pattern for distributed transactions across microservices",
            "Order processing state machine: created → paid → shipped → delivered",
            "Workflow engines (Temporal, Step Functions) for complex multi-step processes",
        ),
    ),
    SoftwarePrinciple(
        id=37,
        name="Thermal Expansion / Auto-Scaling",
        description="System expands to handle load and contracts when idle — auto-scaling, elastic compute, burst capacity.",
        software_examples=(
            "Horizontal pod autoscaling based on CPU/memory metrics",
            "Serverless auto-scaling to zero when idle",
            "Cloud burst: overflow to public cloud when private capacity is exhausted",
        ),
    ),
    SoftwarePrinciple(
        id=38,
        name="Accelerated Oxidation / Stress Testing",
        description="Intentionally accelerate failure to find weaknesses — chaos engineering, load testing, fuzz testing.",
        software_examples=(
            "Chaos engineering: randomly kill instances to verify resilience",
            "Load testing to 10x expected traffic to find breaking points",
            "Fuzz testing: send random/malformed inputs to find edge cases",
        ),
    ),
    SoftwarePrinciple(
        id=39,
        name="Inert Environment / Sandboxing",
        description="Create isolated, safe environments — sandboxing, containerization, network isolation, air-gapped deployments.",
        software_examples=(
            "Container sandboxing with restricted system call access (seccomp)",
            "Network segmentation isolating production from development",
            "Air-gapped environments for sensitive workloads (compliance, security)",
        ),
    ),
    SoftwarePrinciple(
        id=40,
        name="Composite Materials / Polyglot Systems",
        description="Combine different technologies for optimal results — polyglot persistence, hybrid cloud, multi-model databases.",
        software_examples=(
            "Polyglot persistence: SQL for transactions, Redis for cache, Elasticsearch for search",
            "Hybrid cloud: sensitive data on-premise, burst compute in public cloud",
            "Multi-model databases combining document, graph, and key-value access patterns",
        ),
    ),
)
