"""📦 modules/ — Bounded contexts específicos del negocio

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/        → Entidades, reglas y puertos del subdominio
   • application/   → Casos de uso
   • infrastructure/→ Adaptadores concretos y observabilidad
   • entry_points/  → CLI
"""
