import simpy


class MessageBroker:
    """
    Topic-based publish-subscribe channel between the controller and observers.

    The elevator core never waits on the broker. The controller publishes
    status reports and hall call assignments here, and SimPy processes such
    as Statistics consume them. Every message is also copied to a global
    broadcast pipe.

    A topic pipe exists once somebody subscribes with get_pipe() or get().
    Messages on topics nobody subscribed to only go to the broadcast pipe.

    Topics used in this project:
        elevator/{name}/status              Elevator status after every change
        elevator/{name}/door                Door opened or closed
        controller/hall_call                Hall call submitted
        controller/hall_call_assignment     Hall call bound to an elevator
    """
    def __init__(self, env: simpy.Environment, verbose: bool = True):
        """
        Args:
            env (simpy.Environment): SimPy environment
            verbose (bool): Print every published message
        """
        self.env = env
        self.verbose = verbose
        self.topics = {}  # Store for each topic
        self.broadcast_pipe = simpy.Store(self.env)

    def get_pipe(self, topic: str) -> simpy.Store:
        """Get or create the Store for a topic"""
        if topic not in self.topics:
            self.topics[topic] = simpy.Store(self.env)
        return self.topics[topic]

    def put(self, topic: str, message):
        """Publish a message on the broadcast pipe and on the topic pipe, if subscribed"""
        if self.verbose:
            print(f"{self.env.now:.2f} [Broker] Publish on '{topic}': {message}")
        self.broadcast_pipe.put({'topic': topic, 'message': message})
        pipe = self.topics.get(topic)
        if pipe is None:
            return None
        return pipe.put(message)

    def get(self, topic: str):
        """Wait for the next message on a topic"""
        return self.get_pipe(topic).get()

    def get_broadcast_pipe(self) -> simpy.Store:
        """Pipe that receives a copy of every message (used by Statistics)"""
        return self.broadcast_pipe

    def get_current_time(self) -> float:
        """
        Current simulation time

        Lets the controller timestamp events without depending on the SimPy
        environment directly.
        """
        return self.env.now
