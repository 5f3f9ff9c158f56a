"""
physics_core.py: Per-tick kinematics and collision logic.
"""

from .constants import (
    MAX_NOSE_DOWN_ROTATION, NOSE_DOWN_FACTOR, NOSE_DOWN_THRESHOLD,
    NOSE_UP_ROTATION, PIPE_MARGIN
)
from .data_models import Bird, Cloud, Pipe


class PhysicsCore:
    """
    Stateless physics used by the game engine. One call advances one
    rendered frame; there is no wall-clock delta.
    """

    def integrate(self, bird: Bird):
        """Semi-implicit Euler: velocity first, then position."""
        bird.velocity += bird.gravity
        bird.y += bird.velocity

    def update_rotation(self, bird: Bird):
        """
        Nose up while rising, nose down (clamped) while falling fast.
        Between 0 and the threshold the previous angle is kept.
        """
        if bird.velocity < 0:
            bird.rotation = NOSE_UP_ROTATION
        elif bird.velocity > NOSE_DOWN_THRESHOLD:
            bird.rotation = min(bird.velocity * NOSE_DOWN_FACTOR, MAX_NOSE_DOWN_ROTATION)

    def flap(self, bird: Bird):
        """Flap replaces the velocity, it does not add to it."""
        bird.velocity = bird.lift

    def check_collision(self, bird: Bird, pipe: Pipe) -> bool:
        """Box test on x, forbidden band test on y."""
        if bird.x + bird.radius > pipe.x and bird.x - bird.radius < pipe.x + pipe.width:
            if bird.y - bird.radius < pipe.top or bird.y + bird.radius > pipe.bottom:
                return True
        return False

    def out_of_bounds(self, bird: Bird, canvas_height: float) -> bool:
        """Checks for collisions with floor or ceiling."""
        return bird.y + bird.radius > canvas_height or bird.y - bird.radius < 0

    def scroll_pipe(self, pipe: Pipe, game_speed: float, scale_factor: float):
        pipe.x -= game_speed * scale_factor

    def oscillate_pipe(self, pipe: Pipe, scale_factor: float, canvas_height: float):
        """Drifts a moving pipe's gap and bounces it off the margins."""
        if not pipe.moving:
            return
        pipe.top += pipe.move_speed
        pipe.bottom += pipe.move_speed
        margin = PIPE_MARGIN * scale_factor
        if pipe.top < margin or pipe.bottom > canvas_height - margin:
            pipe.move_speed *= -1

    def is_offscreen(self, pipe: Pipe) -> bool:
        return pipe.x + pipe.width < 0

    def drift_cloud(self, cloud: Cloud):
        cloud.x -= cloud.speed

    def cloud_offscreen(self, cloud: Cloud) -> bool:
        return cloud.x + cloud.radius * 2 < 0
