"""Light transport integrator, render driver, scenes and image output."""
