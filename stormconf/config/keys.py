"""
Configuration Key Catalogue

Every configuration key recognized by the cluster, bound to the validator
describing the legal shape of its value and a short documentation string.

The module-level constants hold the key *names*, so they can be used
directly as map keys:

    conf[TOPOLOGY_WORKERS] = 4

Key names are part of the storage and wire contract between submitting
clients, the master and workers. Once published a name and the shape of its
value never change; new keys may be added freely. Keys not listed here are
legal and pass through unvalidated.

Default values live in ``defaults.yaml`` next to this module.

Author: stormconf Project
License: MIT
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .validators import (
    IS_BOOLEAN,
    IS_INTEGER,
    IS_MAP,
    IS_NUMBER,
    IS_STRING,
    METRICS_CONSUMERS,
    NUMBERS,
    POWER_OF_TWO,
    SERIALIZATIONS,
    STRINGS,
    STRING_OR_STRING_LIST,
    Validator,
)


@dataclass(frozen=True)
class ConfigKey:
    """
    Descriptor for one recognized configuration key.

    Attributes:
        name: Stable string identifier of the key
        validator: Shape every value stored under the key must satisfy
        doc: Human-readable documentation
        accumulates: True when the value is a list built by appending entries
    """

    name: str
    validator: Optional[Validator]
    doc: str = ""
    accumulates: bool = False


CATALOGUE: Dict[str, ConfigKey] = {}


def _key(name: str, validator: Optional[Validator], doc: str, accumulates: bool = False) -> str:
    if name in CATALOGUE:
        raise ValueError(f"Duplicate configuration key: {name}")
    CATALOGUE[name] = ConfigKey(name, validator, doc, accumulates)
    return name


# Messaging

STORM_MESSAGING_TRANSPORT = _key(
    "storm.messaging.transport", IS_STRING,
    "Plugin identifier of the transport used between tasks.")
STORM_MESSAGING_NETTY_BUFFER_SIZE = _key(
    "storm.messaging.netty.buffer_size", IS_NUMBER,
    "Socket buffer size in bytes for the netty transport.")
STORM_MESSAGING_NETTY_MAX_RETRIES = _key(
    "storm.messaging.netty.max_retries", IS_NUMBER,
    "Maximum reconnection attempts before a netty client gives up.")
STORM_MESSAGING_NETTY_MIN_SLEEP_MS = _key(
    "storm.messaging.netty.min_wait_ms", IS_NUMBER,
    "Minimum backoff between netty reconnection attempts, in milliseconds.")
STORM_MESSAGING_NETTY_MAX_SLEEP_MS = _key(
    "storm.messaging.netty.max_wait_ms", IS_NUMBER,
    "Maximum backoff between netty reconnection attempts, in milliseconds.")
STORM_MESSAGING_NETTY_SERVER_WORKER_THREADS = _key(
    "storm.messaging.netty.server_worker_threads", IS_NUMBER,
    "Number of netty server worker threads.")
STORM_MESSAGING_NETTY_CLIENT_WORKER_THREADS = _key(
    "storm.messaging.netty.client_worker_threads", IS_NUMBER,
    "Number of netty client worker threads.")
STORM_NETTY_MESSAGE_BATCH_SIZE = _key(
    "storm.messaging.netty.transfer.batch.size", IS_NUMBER,
    "Maximum bytes batched into a single netty transfer.")
STORM_NETTY_FLUSH_CHECK_INTERVAL_MS = _key(
    "storm.messaging.netty.flush.check.interval.ms", IS_NUMBER,
    "Interval between checks for pending netty messages to flush.")

# Coordination service

STORM_ZOOKEEPER_SERVERS = _key(
    "storm.zookeeper.servers", STRINGS,
    "Hostnames of the coordination service ensemble.")
STORM_ZOOKEEPER_PORT = _key(
    "storm.zookeeper.port", IS_NUMBER,
    "Port of the coordination service ensemble.")
STORM_ZOOKEEPER_ROOT = _key(
    "storm.zookeeper.root", IS_STRING,
    "Root path under which cluster state is stored.")
STORM_ZOOKEEPER_SESSION_TIMEOUT = _key(
    "storm.zookeeper.session.timeout", IS_NUMBER,
    "Session timeout for coordination clients, in milliseconds.")
STORM_ZOOKEEPER_CONNECTION_TIMEOUT = _key(
    "storm.zookeeper.connection.timeout", IS_NUMBER,
    "Connection timeout for coordination clients, in milliseconds.")
STORM_ZOOKEEPER_RETRY_TIMES = _key(
    "storm.zookeeper.retry.times", IS_NUMBER,
    "Number of retries for coordination service operations.")
STORM_ZOOKEEPER_RETRY_INTERVAL = _key(
    "storm.zookeeper.retry.interval", IS_NUMBER,
    "Base interval between coordination retries, in milliseconds.")
STORM_ZOOKEEPER_RETRY_INTERVAL_CEILING = _key(
    "storm.zookeeper.retry.intervalceiling.millis", IS_NUMBER,
    "Ceiling on the interval between coordination retries, in milliseconds.")
STORM_ZOOKEEPER_AUTH_SCHEME = _key(
    "storm.zookeeper.auth.scheme", IS_STRING,
    "Authentication scheme used with the coordination service.")
STORM_ZOOKEEPER_AUTH_PAYLOAD = _key(
    "storm.zookeeper.auth.payload", IS_STRING,
    "Authentication payload used with the coordination service.")

# Cluster-wide

STORM_LOCAL_DIR = _key(
    "storm.local.dir", IS_STRING,
    "Local directory where daemons keep small amounts of state.")
STORM_SCHEDULER = _key(
    "storm.scheduler", IS_STRING,
    "Plugin identifier of the scheduler used by the master.")
STORM_CLUSTER_MODE = _key(
    "storm.cluster.mode", IS_STRING,
    "Mode the cluster runs in, either \"distributed\" or \"local\".")
STORM_LOCAL_HOSTNAME = _key(
    "storm.local.hostname", IS_STRING,
    "Hostname daemons report instead of the auto-detected one.")
STORM_THRIFT_TRANSPORT_PLUGIN = _key(
    "storm.thrift.transport", IS_STRING,
    "Plugin identifier of the RPC transport factory.")
STORM_LOCAL_MODE_ZMQ = _key(
    "storm.local.mode.zmq", IS_BOOLEAN,
    "Whether local mode uses zmq instead of in-process queues.")
STORM_ID = _key(
    "storm.id", IS_STRING,
    "Identifier of the running topology, set by the cluster.")
TOPOLOGY_TUPLE_SERIALIZER = _key(
    "topology.tuple.serializer", IS_STRING,
    "Plugin identifier of the tuple serializer.")

# Master

NIMBUS_HOST = _key(
    "nimbus.host", IS_STRING,
    "Host the master daemon runs on.")
NIMBUS_THRIFT_PORT = _key(
    "nimbus.thrift.port", IS_NUMBER,
    "Port the master RPC server listens on.")
NIMBUS_THRIFT_MAX_BUFFER_SIZE = _key(
    "nimbus.thrift.max_buffer_size", IS_NUMBER,
    "Maximum buffer size of the master RPC server, in bytes.")
NIMBUS_CHILDOPTS = _key(
    "nimbus.childopts", IS_STRING,
    "Runtime options for the master process.")
NIMBUS_TASK_TIMEOUT_SECS = _key(
    "nimbus.task.timeout.secs", IS_NUMBER,
    "Seconds without a heartbeat before a task is reassigned.")
NIMBUS_MONITOR_FREQ_SECS = _key(
    "nimbus.monitor.freq.secs", IS_NUMBER,
    "How often the master checks heartbeats and reassigns work.")
NIMBUS_CLEANUP_INBOX_FREQ_SECS = _key(
    "nimbus.cleanup.inbox.freq.secs", IS_NUMBER,
    "How often the master deletes expired uploaded artifacts.")
NIMBUS_INBOX_JAR_EXPIRATION_SECS = _key(
    "nimbus.inbox.jar.expiration.secs", IS_NUMBER,
    "Age in seconds after which an uploaded artifact is deleted.")
NIMBUS_SUPERVISOR_TIMEOUT_SECS = _key(
    "nimbus.supervisor.timeout.secs", IS_NUMBER,
    "Seconds without a heartbeat before a supervisor is considered dead.")
NIMBUS_TASK_LAUNCH_SECS = _key(
    "nimbus.task.launch.secs", IS_NUMBER,
    "Grace period granted to tasks that have just been launched.")
NIMBUS_REASSIGN = _key(
    "nimbus.reassign", IS_BOOLEAN,
    "Whether the master reassigns tasks when workers die.")
NIMBUS_FILE_COPY_EXPIRATION_SECS = _key(
    "nimbus.file.copy.expiration.secs", IS_NUMBER,
    "Seconds of inactivity after which a file transfer is abandoned.")
NIMBUS_TOPOLOGY_VALIDATOR = _key(
    "nimbus.topology.validator", IS_STRING,
    "Plugin identifier of the topology validator run on submission.")
NIMBUS_AUTHORIZER = _key(
    "nimbus.authorizer", IS_STRING,
    "Plugin identifier of the master authorization plugin.")

# UI and log viewer

UI_PORT = _key(
    "ui.port", IS_NUMBER,
    "Port the web UI listens on.")
UI_CHILDOPTS = _key(
    "ui.childopts", IS_STRING,
    "Runtime options for the web UI process.")
LOGVIEWER_PORT = _key(
    "logviewer.port", IS_NUMBER,
    "Port the log viewer listens on.")
LOGVIEWER_CHILDOPTS = _key(
    "logviewer.childopts", IS_STRING,
    "Runtime options for the log viewer process.")
LOGVIEWER_APPENDER_NAME = _key(
    "logviewer.appender.name", IS_STRING,
    "Name of the log appender the log viewer reads from.")

# Distributed RPC

DRPC_SERVERS = _key(
    "drpc.servers", STRINGS,
    "Hostnames of the distributed RPC servers.")
DRPC_PORT = _key(
    "drpc.port", IS_NUMBER,
    "Port distributed RPC servers listen on.")
DRPC_WORKER_THREADS = _key(
    "drpc.worker.threads", IS_NUMBER,
    "Number of distributed RPC worker threads.")
DRPC_QUEUE_SIZE = _key(
    "drpc.queue.size", IS_NUMBER,
    "Capacity of the distributed RPC request queue.")
DRPC_INVOCATIONS_PORT = _key(
    "drpc.invocations.port", IS_NUMBER,
    "Port topologies use to fetch distributed RPC invocations.")
DRPC_REQUEST_TIMEOUT_SECS = _key(
    "drpc.request.timeout.secs", IS_NUMBER,
    "Seconds before an unanswered distributed RPC request times out.")
DRPC_CHILDOPTS = _key(
    "drpc.childopts", IS_STRING,
    "Runtime options for the distributed RPC server process.")

# Supervisor

SUPERVISOR_SCHEDULER_META = _key(
    "supervisor.scheduler.meta", IS_MAP,
    "Arbitrary metadata a supervisor exposes to the scheduler.")
SUPERVISOR_SLOTS_PORTS = _key(
    "supervisor.slots.ports", NUMBERS,
    "Ports a supervisor may start workers on, one worker per port.")
SUPERVISOR_CHILDOPTS = _key(
    "supervisor.childopts", IS_STRING,
    "Runtime options for the supervisor process.")
SUPERVISOR_WORKER_TIMEOUT_SECS = _key(
    "supervisor.worker.timeout.secs", IS_NUMBER,
    "Seconds without a heartbeat before a supervisor restarts a worker.")
SUPERVISOR_WORKER_START_MAX_RETRY = _key(
    "supervisor.worker.start.retry.max", IS_NUMBER,
    "Maximum attempts to start a worker.")
SUPERVISOR_WORKER_START_TIMEOUT_SECS = _key(
    "supervisor.worker.start.timeout.secs", IS_NUMBER,
    "Seconds a newly started worker has to produce its first heartbeat.")
SUPERVISOR_ENABLE = _key(
    "supervisor.enable", IS_BOOLEAN,
    "Whether the supervisor manages worker processes.")
SUPERVISOR_HEARTBEAT_FREQUENCY_SECS = _key(
    "supervisor.heartbeat.frequency.secs", IS_NUMBER,
    "How often the supervisor sends heartbeats.")
SUPERVISOR_MONITOR_FREQUENCY_SECS = _key(
    "supervisor.monitor.frequency.secs", IS_NUMBER,
    "How often the supervisor checks worker heartbeats.")

# Worker and task

WORKER_CHILDOPTS = _key(
    "worker.childopts", STRING_OR_STRING_LIST,
    "Runtime options for worker processes.")
WORKER_RECEIVER_THREAD_COUNT = _key(
    "topology.worker.receiver.thread.count", IS_NUMBER,
    "Number of receiver threads per worker.")
WORKER_HEARTBEAT_FREQUENCY_SECS = _key(
    "worker.heartbeat.frequency.secs", IS_NUMBER,
    "How often workers heartbeat to the supervisor.")
TASK_HEARTBEAT_FREQUENCY_SECS = _key(
    "task.heartbeat.frequency.secs", IS_NUMBER,
    "How often tasks heartbeat their status to the master.")
TASK_REFRESH_POLL_SECS = _key(
    "task.refresh.poll.secs", IS_NUMBER,
    "How often tasks refresh their connections to other tasks.")

# Topology

TOPOLOGY_ENABLE_MESSAGE_TIMEOUTS = _key(
    "topology.enable.message.timeouts", IS_BOOLEAN,
    "Whether tuples time out when not fully processed in time.")
TOPOLOGY_DEBUG = _key(
    "topology.debug", IS_BOOLEAN,
    "When true every emitted message is logged.")
TOPOLOGY_MULTILANG_SERIALIZER = _key(
    "topology.multilang.serializer", IS_STRING,
    "Plugin identifier of the serializer for multi-language components.")
TOPOLOGY_WORKERS = _key(
    "topology.workers", IS_NUMBER,
    "Number of worker processes to allocate for the topology.")
TOPOLOGY_TASKS = _key(
    "topology.tasks", IS_NUMBER,
    "Number of tasks to create per component.")
TOPOLOGY_ACKER_EXECUTORS = _key(
    "topology.acker.executors", IS_NUMBER,
    "Number of executors tracking tuple trees; 0 disables acking.")
TOPOLOGY_MESSAGE_TIMEOUT_SECS = _key(
    "topology.message.timeout.secs", IS_NUMBER,
    "Seconds a tuple tree has to complete before it is failed.")
TOPOLOGY_KRYO_REGISTER = _key(
    "topology.kryo.register", SERIALIZATIONS,
    "Serialization registrations: class identifiers or {class: serializer} maps.",
    accumulates=True)
TOPOLOGY_KRYO_DECORATORS = _key(
    "topology.kryo.decorators", STRINGS,
    "Identifiers of decorators applied to the serialization engine.",
    accumulates=True)
TOPOLOGY_KRYO_FACTORY = _key(
    "topology.kryo.factory", IS_STRING,
    "Plugin identifier of the serialization engine factory.")
TOPOLOGY_SKIP_MISSING_KRYO_REGISTRATIONS = _key(
    "topology.skip.missing.kryo.registrations", IS_BOOLEAN,
    "Whether unresolvable serialization registrations are skipped.")
TOPOLOGY_METRICS_CONSUMER_REGISTER = _key(
    "topology.metrics.consumer.register", METRICS_CONSUMERS,
    "Metrics consumer registrations: {class, parallelism.hint, argument} records.",
    accumulates=True)
TOPOLOGY_MAX_TASK_PARALLELISM = _key(
    "topology.max.task.parallelism", IS_NUMBER,
    "Upper bound on the parallelism of any component.")
TOPOLOGY_MAX_SPOUT_PENDING = _key(
    "topology.max.spout.pending", IS_NUMBER,
    "Maximum pending tuples per spout task.")
TOPOLOGY_SPOUT_WAIT_STRATEGY = _key(
    "topology.spout.wait.strategy", IS_STRING,
    "Plugin identifier of the strategy used when spouts have nothing to emit.")
TOPOLOGY_SLEEP_SPOUT_WAIT_STRATEGY_TIME_MS = _key(
    "topology.sleep.spout.wait.strategy.time.ms", IS_NUMBER,
    "Sleep time used by the sleeping spout wait strategy.")
TOPOLOGY_STATE_SYNCHRONIZATION_TIMEOUT_SECS = _key(
    "topology.state.synchronization.timeout.secs", IS_NUMBER,
    "Maximum time a component waits to synchronize state.")
TOPOLOGY_STATS_SAMPLE_RATE = _key(
    "topology.stats.sample.rate", IS_NUMBER,
    "Fraction of tuples sampled for statistics.")
TOPOLOGY_BUILTIN_METRICS_BUCKET_SIZE_SECS = _key(
    "topology.builtin.metrics.bucket.size.secs", IS_NUMBER,
    "Time bucket size of the built-in metrics.")
TOPOLOGY_FALL_BACK_ON_JAVA_SERIALIZATION = _key(
    "topology.fall.back.on.java.serialization", IS_BOOLEAN,
    "Whether unregistered types fall back to the platform serializer.")
TOPOLOGY_WORKER_CHILDOPTS = _key(
    "topology.worker.childopts", STRING_OR_STRING_LIST,
    "Topology-specific runtime options appended to worker.childopts.")
TOPOLOGY_TRANSACTIONAL_ID = _key(
    "topology.transactional.id", IS_STRING,
    "Identifier used to store transactional topology state.")
TOPOLOGY_AUTO_TASK_HOOKS = _key(
    "topology.auto.task.hooks", STRINGS,
    "Identifiers of task hooks attached to every task automatically.",
    accumulates=True)
TOPOLOGY_EXECUTOR_RECEIVE_BUFFER_SIZE = _key(
    "topology.executor.receive.buffer.size", POWER_OF_TWO,
    "Size of each executor's receive queue.")
TOPOLOGY_RECEIVER_BUFFER_SIZE = _key(
    "topology.receiver.buffer.size", POWER_OF_TWO,
    "Maximum messages batched by a worker receiver thread.")
TOPOLOGY_EXECUTOR_SEND_BUFFER_SIZE = _key(
    "topology.executor.send.buffer.size", POWER_OF_TWO,
    "Size of each executor's send queue.")
TOPOLOGY_TRANSFER_BUFFER_SIZE = _key(
    "topology.transfer.buffer.size", IS_NUMBER,
    "Size of each worker's outbound transfer queue.")
TOPOLOGY_TICK_TUPLE_FREQ_SECS = _key(
    "topology.tick.tuple.freq.secs", IS_NUMBER,
    "How often tick tuples are sent to each component.")
TOPOLOGY_DISRUPTOR_WAIT_STRATEGY = _key(
    "topology.disruptor.wait.strategy", IS_STRING,
    "Plugin identifier of the wait strategy used by internal queues.")
TOPOLOGY_WORKER_SHARED_THREAD_POOL_SIZE = _key(
    "topology.worker.shared.thread.pool.size", IS_NUMBER,
    "Size of the thread pool shared by components of a worker.")
TOPOLOGY_ERROR_THROTTLE_INTERVAL_SECS = _key(
    "topology.error.throttle.interval.secs", IS_NUMBER,
    "Interval over which reported errors are throttled.")
TOPOLOGY_MAX_ERROR_REPORT_PER_INTERVAL = _key(
    "topology.max.error.report.per.interval", IS_NUMBER,
    "Maximum errors reported per task per throttle interval.")
TOPOLOGY_TRIDENT_BATCH_EMIT_INTERVAL_MILLIS = _key(
    "topology.trident.batch.emit.interval.millis", IS_NUMBER,
    "How often batches are emitted by batching topologies.")
TOPOLOGY_NAME = _key(
    "topology.name", IS_STRING,
    "Name of the topology, set by the cluster.")
TOPOLOGY_SHELLBOLT_MAX_PENDING = _key(
    "topology.shellbolt.max.pending", IS_NUMBER,
    "Maximum pending messages queued for a multi-language bolt.")

# Transactional topologies

TRANSACTIONAL_ZOOKEEPER_ROOT = _key(
    "transactional.zookeeper.root", IS_STRING,
    "Root path for transactional topology state.")
TRANSACTIONAL_ZOOKEEPER_SERVERS = _key(
    "transactional.zookeeper.servers", STRINGS,
    "Coordination servers for transactional state; defaults to the cluster's.")
TRANSACTIONAL_ZOOKEEPER_PORT = _key(
    "transactional.zookeeper.port", IS_NUMBER,
    "Coordination port for transactional state; defaults to the cluster's.")

# zmq transport

ZMQ_THREADS = _key(
    "zmq.threads", IS_NUMBER,
    "Number of threads zmq uses per worker.")
ZMQ_LINGER_MILLIS = _key(
    "zmq.linger.millis", IS_NUMBER,
    "How long a closed zmq connection keeps sending pending messages.")
ZMQ_HWM = _key(
    "zmq.hwm", IS_NUMBER,
    "zmq high water mark for outbound messages.")

# Development and isolation

JAVA_LIBRARY_PATH = _key(
    "java.library.path", IS_STRING,
    "Native library search path for worker processes.")
DEV_ZOOKEEPER_PATH = _key(
    "dev.zookeeper.path", IS_STRING,
    "Local path used by the in-process coordination server.")
ISOLATION_SCHEDULER_MACHINES = _key(
    "isolation.scheduler.machines", IS_MAP,
    "Topology name to number of dedicated machines for the isolation scheduler.")

# Adaptive scheduler

ADAPTIVE_SCHEDULER_ENABLED = _key(
    "adaptivescheduler.enabled", IS_BOOLEAN,
    "Whether the adaptive scheduler is active.")
ADAPTIVE_SCHEDULER_NETWORK_SPACE_ROUND_DURATION = _key(
    "adaptivescheduler.network_space.round.duration", IS_NUMBER,
    "Duration of a network coordinate estimation round.")
ADAPTIVE_SCHEDULER_CONTINOUS_SCHEDULER_FREQ_SEC = _key(
    "adaptivescheduler.continuous_scheduler.freq.sec", IS_NUMBER,
    "How often the continuous scheduler runs, in seconds.")
ADAPTIVE_SCHEDULER_NETWORK_SPACE_ALPHA = _key(
    "adaptivescheduler.network_space.alpha", IS_NUMBER,
    "Alpha coefficient of the network coordinate estimator.")
ADAPTIVE_SCHEDULER_NETWORK_SPACE_BETA = _key(
    "adaptivescheduler.network_space.beta", IS_NUMBER,
    "Beta coefficient of the network coordinate estimator.")
ADAPTIVE_SCHEDULER_NETWORK_SPACE_SERVER_PORT = _key(
    "adaptivescheduler.network_space.server.port", IS_NUMBER,
    "Port of the network coordinate exchange server.")
ADAPTIVE_SCHEDULER_NETWORK_SPACE_CONFIDENCE_THRESHOLD = _key(
    "adaptivescheduler.network_space.confidence_threshold", IS_NUMBER,
    "Confidence a coordinate estimate needs before it is used.")
ADAPTIVE_SCHEDULER_NETWORK_SPACE_ROUND_BEETWEEN_PUBLICATION = _key(
    "adaptivescheduler.network_space.round_between_publications", IS_NUMBER,
    "Estimation rounds between publications of local coordinates.")
ADAPTIVE_SCHEDULER_WORKER_MONITOR_ENABLED = _key(
    "adaptivescheduler.worker_monitor.enabled", IS_BOOLEAN,
    "Whether workers collect traffic statistics for the scheduler.")
ADAPTIVE_SCHEDULER_WORKER_MONITOR_COMPUTE_STATS_FREQ_SEC = _key(
    "adaptivescheduler.worker_monitor.stats.freq.sec", IS_NUMBER,
    "How often worker traffic statistics are computed, in seconds.")
ADAPTIVE_SCHEDULER_INTERNAL_DATABASE_PORT = _key(
    "adaptivescheduler.internal.database.port", IS_NUMBER,
    "Port of the scheduler's internal statistics database.")
ADAPTIVE_SCHEDULER_CONTINUOUS_SCHEDULER_FORCE_THRESHOLD = _key(
    "adaptivescheduler.continuous_scheduler.force.threshold", IS_NUMBER,
    "Cost threshold above which a move is forced.")
ADAPTIVE_SCHEDULER_CONTINUOUS_SCHEDULER_FORCE_DELTA = _key(
    "adaptivescheduler.continuous_scheduler.force.delta", IS_NUMBER,
    "Step applied when computing forced moves.")
ADAPTIVE_SCHEDULER_CONTINUOUS_SCHEDULER_MAX_EXECUTOR_PER_SLOT = _key(
    "adaptivescheduler.continuous_scheduler.max_exec_per_slot", IS_NUMBER,
    "Maximum executors the continuous scheduler places in one slot.")
ADAPTIVE_SCHEDULER_CONTINUOUS_SCHEDULER_K_NEAREST_NODE = _key(
    "adaptivescheduler.continuous_scheduler.nearest_node.k", IS_NUMBER,
    "Number of nearest nodes considered as migration targets.")
ADAPTIVE_SCHEDULER_CONTINUOUS_SCHEDULER_MIGRATION_THRESHOLD = _key(
    "adaptivescheduler.continuous_scheduler.migration_threshold", IS_NUMBER,
    "Minimum gain required before an executor migrates.")
ADAPTIVE_SCHEDULER_INITIAL_SCHEDULER_LOCATION_AWARE = _key(
    "adaptivescheduler.initial_scheduler.location_aware", IS_BOOLEAN,
    "Whether initial placement takes node locations into account.")
ADAPTIVE_SCHEDULER_USE_EXTENDED_SPACE = _key(
    "adaptivescheduler.space.use_extended_space", IS_BOOLEAN,
    "Whether the extended cost space is used for placement.")
ADAPTIVE_SCHEDULER_JUST_MONITOR = _key(
    "adaptivescheduler.just_monitor", IS_BOOLEAN,
    "Collect statistics without migrating executors.")
ADAPTIVE_SCHEDULER_SPACE_MAX_LATENCY = _key(
    "adaptivescheduler.space.latency.max", IS_NUMBER,
    "Latency used to normalize the latency dimension of the cost space.")
ADAPTIVE_SCHEDULER_SPACE_W1 = _key(
    "adaptivescheduler.space.weight.1", IS_NUMBER,
    "Weight of the first cost space dimension.")
ADAPTIVE_SCHEDULER_SPACE_W2 = _key(
    "adaptivescheduler.space.weight.2", IS_NUMBER,
    "Weight of the second cost space dimension.")
ADAPTIVE_SCHEDULER_SPACE_W3 = _key(
    "adaptivescheduler.space.weight.3", IS_NUMBER,
    "Weight of the third cost space dimension.")
ADAPTIVE_SCHEDULER_SPACE_RELIABILITY = _key(
    "adaptivescheduler.space.reliability", IS_NUMBER,
    "Default node reliability used by the cost space.")
ADAPTIVE_SCHEDULER_SPACE_USE_UTILIZATION = _key(
    "adaptivescheduler.space.third.as.utilization", IS_BOOLEAN,
    "Use node utilization as the third cost space dimension.")
ADAPTIVE_SCHEDULER_SPACE_RELIABILITY_PATH = _key(
    "adaptivescheduler.space.reliability.path", IS_STRING,
    "File holding per-node reliability values.")
ADAPTIVE_SCHEDULER_TYPE = _key(
    "adaptivescheduler.type", IS_STRING,
    "Name of the adaptive scheduling algorithm.")
ADAPTIVE_SCHEDULER_GRADIENTSTEP_RETRY_MAX_COUNTER = _key(
    "adaptivescheduler.gradientstep.retry_max_counter", IS_INTEGER,
    "Maximum retries of the gradient step algorithm.")
ADAPTIVE_SCHEDULER_GRADIENTSTEP_TOPOLOGY_COOLDOWN = _key(
    "adaptivescheduler.gradientstep.topology_cooldown", IS_INTEGER,
    "Rounds a topology rests after a migration.")
ADAPTIVE_SCHEDULER_GRADIENTSTEP_DEBUG = _key(
    "adaptivescheduler.gradientstep.debug", IS_BOOLEAN,
    "Verbose logging for the gradient step algorithm.")
ADAPTIVE_SCHEDULER_GRADIENTSTEP_IMPROVEMENT_TRESHOLD = _key(
    "adaptivescheduler.gradientstep.improvement_treshold", IS_NUMBER,
    "Minimum improvement a gradient step must achieve.")
ADAPTIVE_SCHEDULER_GRADIENTSTEP_MIGRATION_TRESHOLD = _key(
    "adaptivescheduler.gradientstep.migration_treshold", IS_NUMBER,
    "Cost threshold above which the gradient step migrates executors.")
ADAPTIVE_SCHEDULER_GRADIENTSTEP_MIGRATION_IMPROVEMENT_FRACTION = _key(
    "adaptivescheduler.gradientstep.migration_improvement_fraction", IS_NUMBER,
    "Fraction of the estimated gain that justifies a migration.")
