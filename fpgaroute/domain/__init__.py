"""Domain layer: fabric interfaces, route trees and routing results."""
