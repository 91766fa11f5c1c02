# In-memory record models
