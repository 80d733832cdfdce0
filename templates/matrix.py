# ==========================================================
# TEMPLATE – EISENHOWER MATRIX
# ==========================================================

MATRIX_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Eisenhower Matrix</title>
<style>
body {
  font-family: system-ui;
  background:#f6f7f9;
  padding:24px;
  margin:0;
}

.header {
  display:flex;
  flex-direction:column;
  align-items:center;
}

.header h1 {
  font-size:36px;
  font-weight:700;
}

.card {
  background:#fff;
  border-radius:14px;
  padding:16px;
  box-shadow:0 10px 24px rgba(0,0,0,0.06);
}

.analytics {
  display:flex;
  flex-wrap:wrap;
  gap:18px;
  justify-content:center;
  margin-bottom:32px;
}

.stat { text-align:center; min-width:70px; }
.stat-value { font-size:22px; font-weight:700; }
.stat-label { font-size:13px; color:#6b7280; }
.stat-quadrants { width:100%; text-align:center; font-size:13px; color:#6b7280; }
.stat-quadrant { margin:0 6px; white-space:nowrap; }

.matrix {
  display:grid;
  grid-template-columns:repeat(4, 1fr);
  gap:24px;
}

@media (max-width:1023px){
  .matrix { grid-template-columns:1fr 1fr; }
}

@media (max-width:767px){
  .matrix { grid-template-columns:1fr; }
}

.quad {
  border-radius:12px;
  padding:24px;
  border:4px solid;
  background:rgba(255,255,255,.6);
}

.heading {
  display:inline-block;
  color:#fff;
  padding:8px;
  border-radius:8px 0 0 8px;
  font-size:22px;
  margin:0 0 16px;
}

.border-red { border-color:#ef4444; color:#ef4444; }
.border-green { border-color:#22c55e; color:#22c55e; }
.border-yellow { border-color:#eab308; color:#eab308; }
.border-blue { border-color:#3b82f6; color:#3b82f6; }

.bg-red { background:#ef4444; }
.bg-green { background:#22c55e; }
.bg-yellow { background:#eab308; }
.bg-blue { background:#3b82f6; }

.glow-red { box-shadow:0 0 18px rgba(239,68,68,.35); }
.glow-green { box-shadow:0 0 18px rgba(34,197,94,.35); }
.glow-yellow { box-shadow:0 0 18px rgba(234,179,8,.35); }
.glow-blue { box-shadow:0 0 18px rgba(59,130,246,.35); }

.tasks { list-style:none; padding:0; margin:0; }

.task {
  display:flex;
  align-items:center;
  margin-bottom:8px;
  color:#111827;
}

.task form { display:flex; align-items:center; gap:8px; margin:0; }

.task-title { font-size:16px; }

.task-completed {
  text-decoration:line-through;
  opacity:.6;
}

.new-task {
  margin-top:16px;
  padding:8px;
  width:100%;
  box-sizing:border-box;
  border:1px solid #d1d5db;
  border-radius:999px;
  transition:all .3s;
}

.new-task:focus {
  border-radius:6px;
  outline:none;
}
</style>
</head>

<body>

<div class="header">
  <h1>Eisenhower Matrix</h1>
  {{ analytics_panel|safe }}
</div>

{% if view.loading %}
<p class="loading">Loading tasks...</p>
{% else %}
<div class="matrix">

{% for q in quadrants %}
<div class="quad {{ quadrant_styles[q] }}" id="quadrant-{{ q|lower }}">
  <h2 class="{{ heading_styles[q] }}">{{ q }}</h2>

  <ul class="tasks">
  {% for t in view.tasks_in(q) %}
    {% if t.id is defined and t.id is not none %}
    <li class="task" data-id="{{ t.id }}">
      <form method="post" action="{{ url_for('toggle_task', task_id=t.id) }}">
        <input type="hidden" name="completed"
               value="{{ 'false' if t.completed else 'true' }}">
        <input type="checkbox"
               {% if t.completed %}checked{% endif %}
               onchange="this.form.submit()">
        <span class="task-title {% if t.completed %}task-completed{% endif %}">
          {{ t.title }}
        </span>
      </form>
    </li>
    {% else %}
    {# no id from the store: nothing to address a toggle to #}
    <li class="task">
      <input type="checkbox" disabled {% if t.completed %}checked{% endif %}>
      <span class="task-title {% if t.completed %}task-completed{% endif %}">
        {{ t.title }}
      </span>
    </li>
    {% endif %}
  {% endfor %}
  </ul>

  <form method="post" action="{{ url_for('add_task') }}">
    <input type="hidden" name="quadrant" value="{{ q }}">
    <input type="text" name="title" class="new-task"
           placeholder="New Task" autocomplete="off">
  </form>
</div>
{% endfor %}

</div>
{% endif %}

</body>
</html>
"""
