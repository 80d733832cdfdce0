ANALYTICS_TEMPLATE = """
<div class="analytics card">
  <div class="stat">
    <div class="stat-value">{{ summary.total }}</div>
    <div class="stat-label">Tasks</div>
  </div>
  <div class="stat">
    <div class="stat-value">{{ summary.done }}</div>
    <div class="stat-label">Done</div>
  </div>
  <div class="stat">
    <div class="stat-value">{{ summary.open }}</div>
    <div class="stat-label">Open</div>
  </div>
  <div class="stat">
    <div class="stat-value">{{ summary.percent_done }}%</div>
    <div class="stat-label">Completed</div>
  </div>

  <div class="stat-quadrants">
  {% for q in quadrants %}
    {% set c = summary.quadrant_counts[q] %}
    <span class="stat-quadrant stat-{{ q|lower }}">
      {{ q }} ({{ c.done }} / {{ c.total }} done)
    </span>
  {% endfor %}
  </div>
</div>
"""
